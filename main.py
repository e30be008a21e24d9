"""
Main Flask Application
EduPulse tutoring marketplace API
"""
import logging
import time

from flask import Flask, g, request, jsonify
from flask_cors import CORS
from pymongo.errors import PyMongoError

from config.settings import Settings, settings as default_settings
from services.database import MongoStore, DatabaseServices, EXTENSION_KEY
from shared.json_provider import MongoJSONProvider
from api.base.errors import ApiError

# Import blueprints
from api.users import users_bp
from api.sessions import sessions_bp
from api.reviews import reviews_bp
from api.materials import materials_bp
from api.booked_sessions import booked_sessions_bp
from api.notes import notes_bp

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Settings = None, store: MongoStore = None) -> Flask:
    """
    Build the Flask application

    Args:
        settings: configuration, the module-level settings by default
        store: MongoDB access; built from ``settings`` when omitted.
            The connection is opened lazily on the first query.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    # ============== APP INITIALIZATION ==============
    app = Flask(__name__)
    app.json = MongoJSONProvider(app)
    app.config['DEBUG'] = settings.DEBUG
    app.config['USER_SEARCH_LIMIT'] = settings.USER_SEARCH_LIMIT
    app.config['APP_NAME'] = settings.APP_NAME
    app.config['VERSION'] = settings.VERSION

    CORS(app, origins=settings.CORS_ORIGINS)

    store = store or MongoStore.from_settings(settings)
    app.extensions[EXTENSION_KEY] = DatabaseServices(
        store, settings.get_mongodb_config()["collections"]
    )

    # ============== REGISTER BLUEPRINTS ==============
    app.register_blueprint(users_bp, url_prefix='/users')
    app.register_blueprint(sessions_bp, url_prefix='/sessions')
    app.register_blueprint(reviews_bp)
    app.register_blueprint(materials_bp, url_prefix='/materials')
    app.register_blueprint(booked_sessions_bp, url_prefix='/bookedSessions')
    app.register_blueprint(notes_bp, url_prefix='/notes')

    register_request_logging(app)
    register_error_handlers(app)
    register_service_routes(app)

    return app


# ============== REQUEST LOGGING ==============
def register_request_logging(app: Flask):

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop('request_started', None)
        duration_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info(
            f"{request.method} {request.path} - "
            f"Status: {response.status_code} - "
            f"Duration: {duration_ms:.2f}ms"
        )
        return response


# ============== ERROR HANDLERS ==============
def register_error_handlers(app: Flask):

    @app.errorhandler(ApiError)
    def api_error(error: ApiError):
        if error.status_code >= 500:
            logger.error(f"{request.method} {request.path} failed: {error}", exc_info=True)
        return jsonify({"message": error.message}), error.status_code

    @app.errorhandler(PyMongoError)
    def store_error(error: PyMongoError):
        logger.error(f"{request.method} {request.path} store error: {error}", exc_info=True)
        return jsonify({"message": "Server error"}), 500

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"message": "Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"message": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, "original_exception", None) or error
        logger.error(f"Unhandled exception: {original}", exc_info=original)
        return jsonify({"message": "Server error"}), 500


# ============== ROUTES ==============
def register_service_routes(app: Flask):

    @app.route('/', methods=['GET'])
    def home():
        """API information"""
        return jsonify({
            "message": "Hello learners! Backend is running...",
            "name": app.config['APP_NAME'],
            "version": app.config['VERSION'],
        })

    @app.route('/health', methods=['GET'])
    def health():
        """Liveness plus a MongoDB ping"""
        db = app.extensions[EXTENSION_KEY]
        if db.store.ping():
            return jsonify({"status": "ok", "database": "connected"})
        return jsonify({"status": "degraded", "database": "unavailable"}), 503


app = create_app()


# ============== APPLICATION STARTUP ==============
if __name__ == '__main__':
    default_settings.validate()
    default_settings.log_config_summary()

    try:
        app.extensions[EXTENSION_KEY].store.connect()
    except ApiError as e:
        logger.warning(f"Starting without database connection: {e}")

    logger.info(f"Server starting on http://{default_settings.HOST}:{default_settings.PORT}")
    app.run(debug=default_settings.DEBUG, host=default_settings.HOST, port=default_settings.PORT)
