from app.models.user import User
from app.models.turf import Turf
from app.models.booking import Booking
from app.models.review import Review

# This makes the models directory a Python package and ensures all models are loaded
