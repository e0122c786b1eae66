from enum import Enum


class UserRole(str, Enum):
    """Roles a marketplace account can hold"""

    PLAYER = "player"
    OWNER = "owner"
