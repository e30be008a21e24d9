import os
import logging
from urllib.parse import quote_plus
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Application settings read from the environment (and .env)"""

    def __init__(self):
        # Application Info
        self.APP_NAME: str = "EduPulse API"
        self.VERSION: str = "1.0.0"
        self.DEBUG: bool = _env_bool("DEBUG")

        # Server Configuration
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", 3000))

        # CORS
        self.CORS_ORIGINS: list = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]

        # Environment
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database Configuration
        self.MONGODB_URI: str = os.getenv("MONGODB_URI", "")
        self.DB_USER: str = os.getenv("DB_USER", "")
        self.DB_PASS: str = os.getenv("DB_PASS", "")
        self.MONGODB_HOST: str = os.getenv("MONGODB_HOST", "cluster0.mongodb.net")
        self.MONGODB_APP_NAME: str = os.getenv("MONGODB_APP_NAME", "Cluster0")
        self.DATABASE_NAME: str = os.getenv("DATABASE_NAME", "eduPulseDB")
        self.MONGODB_MAX_POOL_SIZE: int = int(os.getenv("MONGODB_MAX_POOL_SIZE", 50))
        self.MONGODB_TIMEOUT_MS: int = int(os.getenv("MONGODB_TIMEOUT_MS", 5000))

        # Collection Names
        self.USERS_COLLECTION: str = "users"
        self.SESSIONS_COLLECTION: str = "sessions"
        self.MATERIALS_COLLECTION: str = "materials"
        self.REVIEWS_COLLECTION: str = "reviews"
        self.BOOKED_SESSIONS_COLLECTION: str = "bookedSessions"
        self.NOTES_COLLECTION: str = "notes"

        # Query limits
        self.USER_SEARCH_LIMIT: int = int(os.getenv("USER_SEARCH_LIMIT", 50))

    def validate(self):
        """Validate settings before the server starts"""
        if self.is_production() and not (self.MONGODB_URI or (self.DB_USER and self.DB_PASS)):
            raise ValueError("Set MONGODB_URI or DB_USER/DB_PASS for production!")

    def get_mongodb_uri(self) -> str:
        """Build MongoDB connection string"""
        if self.MONGODB_URI:
            return self.MONGODB_URI

        if self.DB_USER and self.DB_PASS:
            return (
                f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
                f"@{self.MONGODB_HOST}/?retryWrites=true&w=majority&appName={self.MONGODB_APP_NAME}"
            )

        return "mongodb://localhost:27017"

    def get_mongodb_config(self) -> dict:
        """Get MongoDB configuration as dictionary"""
        return {
            "uri": self.get_mongodb_uri(),
            "database": self.DATABASE_NAME,
            "max_pool_size": self.MONGODB_MAX_POOL_SIZE,
            "timeout_ms": self.MONGODB_TIMEOUT_MS,
            "collections": {
                "users": self.USERS_COLLECTION,
                "sessions": self.SESSIONS_COLLECTION,
                "materials": self.MATERIALS_COLLECTION,
                "reviews": self.REVIEWS_COLLECTION,
                "booked_sessions": self.BOOKED_SESSIONS_COLLECTION,
                "notes": self.NOTES_COLLECTION,
            },
        }

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENVIRONMENT.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENVIRONMENT.lower() == "production"

    def log_config_summary(self):
        """Log configuration summary (credentials masked)"""
        uri = self.get_mongodb_uri()
        logger.info(
            "Configuration: %s v%s | env=%s | %s:%s | debug=%s | database=%s | mongodb=%s",
            self.APP_NAME,
            self.VERSION,
            self.ENVIRONMENT,
            self.HOST,
            self.PORT,
            self.DEBUG,
            self.DATABASE_NAME,
            uri.split("@")[-1] if "@" in uri else uri,
        )


# Create global settings instance
settings = Settings()
