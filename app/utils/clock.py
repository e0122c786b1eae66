from datetime import datetime


def get_now() -> datetime:
    """Current facility-local time; a FastAPI dependency so tests can pin it."""
    return datetime.now()
