from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import OperationFailure, PyMongoError
from pymongo.server_api import ServerApi
from typing import List, Optional, Tuple
import logging
import threading

from api.base.errors import StoreError

logger = logging.getLogger(__name__)

# (keys, options) pairs passed to create_index
IndexSpec = Tuple[list, dict]


class MongoStore:
    """
    Owns the MongoClient and the selected database

    Built once per application and handed to every collection service.
    Tests pass a ready client (e.g. ``mongomock.MongoClient()``); otherwise
    the client is created from ``uri`` on ``connect``.
    """

    def __init__(
        self,
        uri: str = "mongodb://localhost:27017",
        database_name: str = "eduPulseDB",
        client: Optional[MongoClient] = None,
        max_pool_size: int = 50,
        timeout_ms: int = 5000,
    ):
        self.uri = uri
        self.database_name = database_name
        self.max_pool_size = max_pool_size
        self.timeout_ms = timeout_ms
        self.client: Optional[MongoClient] = client
        self.db = None
        self._owns_client = client is None
        self._connected = False
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings, client: Optional[MongoClient] = None) -> "MongoStore":
        config = settings.get_mongodb_config()
        return cls(
            uri=config["uri"],
            database_name=config["database"],
            client=client,
            max_pool_size=config["max_pool_size"],
            timeout_ms=config["timeout_ms"],
        )

    def _create_client(self) -> MongoClient:
        options = {
            "maxPoolSize": self.max_pool_size,
            "serverSelectionTimeoutMS": self.timeout_ms,
        }
        if self.uri.startswith("mongodb+srv://"):
            options["server_api"] = ServerApi("1")
        return MongoClient(self.uri, **options)

    def connect(self):
        """Connect to MongoDB and verify the server answers"""
        with self._lock:
            if self._connected:
                return

            try:
                if self.client is None:
                    self.client = self._create_client()

                self.client.admin.command("ping")
                self.db = self.client[self.database_name]

                self._connected = True
                logger.info(f"✓ Connected to MongoDB database '{self.database_name}'")

            except PyMongoError as e:
                logger.error(f"✗ MongoDB connection failed: {e}")
                self._connected = False
                raise StoreError("Database unavailable") from e

    def ensure_connected(self):
        """Ensure database is connected before operations"""
        if not self._connected:
            self.connect()

    def collection(self, name: str) -> Collection:
        self.ensure_connected()
        return self.db[name]

    def ping(self) -> bool:
        """True when the server answers a ping"""
        try:
            self.ensure_connected()
            self.client.admin.command("ping")
            return True
        except (PyMongoError, StoreError) as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def disconnect(self):
        """Disconnect from MongoDB (only closes clients this store created)"""
        with self._lock:
            if self.client is not None and self._owns_client:
                self.client.close()
                self.client = None
            self.db = None
            self._connected = False
            logger.info("MongoDB connection closed")


class BaseMongoService:
    """Base class for one MongoDB collection"""

    indexes: List[IndexSpec] = []

    def __init__(self, store: MongoStore, collection_name: str):
        self.store = store
        self.collection_name = collection_name
        self._indexes_ready = False

    @property
    def collection(self) -> Collection:
        collection = self.store.collection(self.collection_name)
        if not self._indexes_ready:
            self._ensure_indexes(collection)
        return collection

    def _ensure_indexes(self, collection: Collection):
        for keys, options in self.indexes:
            try:
                collection.create_index(keys, **options)
            except OperationFailure as e:
                # existing data may violate a unique index; writes still go through the upsert path
                logger.warning(f"Could not create index {keys} on '{self.collection_name}': {e}")
        self._indexes_ready = True
