"""
Database services, one per collection

Usage:
    from services.database import MongoStore, DatabaseServices

    store = MongoStore.from_settings(settings)
    db = DatabaseServices(store)
    db.sessions.find_all(status=SessionStatus.APPROVED)

Inside a request handler use ``get_db()``, which returns the instance the
application was created with.
"""
from flask import current_app

from .base import MongoStore, BaseMongoService
from .users import UsersService
from .sessions import SessionsService
from .materials import MaterialsService
from .reviews import ReviewsService
from .booked_sessions import BookedSessionsService
from .notes import NotesService

EXTENSION_KEY = "database"


class DatabaseServices:
    """All collection services sharing one MongoStore"""

    def __init__(self, store: MongoStore, collections: dict = None):
        names = collections or {}
        self.store = store
        self.users = UsersService(store, names.get("users", "users"))
        self.sessions = SessionsService(store, names.get("sessions", "sessions"))
        self.materials = MaterialsService(store, names.get("materials", "materials"))
        self.reviews = ReviewsService(store, names.get("reviews", "reviews"))
        self.booked_sessions = BookedSessionsService(store, names.get("booked_sessions", "bookedSessions"))
        self.notes = NotesService(store, names.get("notes", "notes"))


def get_db() -> DatabaseServices:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "MongoStore",
    "BaseMongoService",
    "DatabaseServices",
    "UsersService",
    "SessionsService",
    "MaterialsService",
    "ReviewsService",
    "BookedSessionsService",
    "NotesService",
    "get_db",
    "EXTENSION_KEY",
]
