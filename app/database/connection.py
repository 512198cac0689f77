import threading

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from app.config.settings import Settings
from app.database.exceptions import PersistenceConfigError, PersistenceError
from app.logging.logger import Log


class MongoConnection:
    """Lazily connected, process-wide MongoDB handle.

    The first successful connect() is cached and reused by later calls.
    Concurrent first use is serialized so every caller converges on the
    same client. A failed connect leaves the handle unset.
    """

    def __init__(self, settings: Settings) -> None:
        self._uri = settings.mongodb_uri
        self._database_name = settings.mongodb_database
        self._timeout_ms = settings.mongodb_timeout_ms
        self._lock = threading.Lock()
        self._client: MongoClient | None = None
        self._db: Database | None = None

    def connect(self) -> Database:
        """Return the cached database handle, connecting on first use.

        Raises:
            PersistenceConfigError: if no connection string is configured.
            PersistenceError: if the server cannot be reached.
        """
        db = self._db
        if db is not None:
            Log.debug("Using existing MongoDB connection")
            return db

        with self._lock:
            if self._db is not None:
                return self._db
            if not self._uri:
                raise PersistenceConfigError(
                    "MongoDB URI not configured. Set MONGODB_URI."
                )
            Log.info("Connecting to MongoDB")
            client: MongoClient | None = None
            try:
                client = MongoClient(
                    self._uri,
                    server_api=ServerApi("1", strict=True, deprecation_errors=True),
                    serverSelectionTimeoutMS=self._timeout_ms,
                    tz_aware=True,
                )
                client.admin.command("ping")
            except PyMongoError as exc:
                if client is not None:
                    client.close()
                Log.error(f"Failed to connect to MongoDB: {exc}")
                raise PersistenceError(f"MongoDB connection failed: {exc}") from exc

            self._client = client
            self._db = client[self._database_name]
            Log.info(f"Connected to MongoDB database {self._database_name}")
            return self._db

    def close(self) -> None:
        """Close the client and clear the cached handle."""
        with self._lock:
            if self._client is not None:
                self._client.close()
            self._client = None
            self._db = None
