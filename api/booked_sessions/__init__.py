from flask import Blueprint

booked_sessions_bp = Blueprint("booked_sessions", __name__)

from . import routes  # noqa: E402,F401
