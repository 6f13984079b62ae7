"""
MongoDB store client.

A single ``MongoStore`` is built when the application is created, connected
during startup and shared by every request. ``pymongo.MongoClient`` pools
connections and is safe to use from the request threadpool.
"""
import logging
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import OperationFailure, PyMongoError

from learnhub.config import settings
from learnhub.core.errors import StoreError

logger = logging.getLogger(__name__)

COURSES = "courses"
ENROLLMENTS = "enrollments"


class MongoStore:
    """Connection holder exposing the named collections."""

    def __init__(
        self,
        uri: Optional[str] = None,
        db_name: Optional[str] = None,
        client: Optional[MongoClient] = None,
        timeout_ms: Optional[int] = None,
    ):
        self.uri = uri or settings.MONGODB_URI
        self.db_name = db_name or settings.MONGODB_DB_NAME
        self.timeout_ms = timeout_ms or settings.MONGODB_TIMEOUT_MS
        self._client = client
        self._db: Optional[Database] = None

    @property
    def connected(self) -> bool:
        return self._db is not None

    def connect(self) -> None:
        """
        Open the client, verify the server answers and build indexes.

        Calling it on an already connected store is a no-op.

        Raises:
            StoreError: if the server cannot be reached
        """
        if self.connected:
            return

        try:
            if self._client is None:
                self._client = MongoClient(
                    self.uri,
                    serverSelectionTimeoutMS=self.timeout_ms,
                    tz_aware=True,
                )
            self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Could not connect to MongoDB: {str(e)}")
            raise StoreError("Failed to connect to database", str(e)) from e

        self._db = self._client[self.db_name]
        self._ensure_indexes()
        logger.info(f"Connected to MongoDB database '{self.db_name}'")

    def _ensure_indexes(self) -> None:
        # Unique (userEmail, courseId) turns concurrent duplicate enrollments
        # into a DuplicateKeyError on the second insert.
        try:
            self._db[ENROLLMENTS].create_index(
                [("userEmail", ASCENDING), ("courseId", ASCENDING)],
                unique=True,
                name="userEmail_courseId_unique",
            )
        except OperationFailure as e:
            logger.warning(
                f"Could not create unique enrollment index, duplicate checks "
                f"are not atomic: {str(e)}"
            )

    def ping(self) -> None:
        """
        Round trip to the server.

        Raises:
            StoreError: if the store is not connected or does not answer
        """
        if self._client is None:
            raise StoreError("Database connection failed", "Client is not connected")
        try:
            self._client.admin.command("ping")
        except PyMongoError as e:
            raise StoreError("Database connection failed", str(e)) from e

    def collection(self, name: str) -> Collection:
        if self._db is None:
            raise StoreError("Database connection failed", "Client is not connected")
        return self._db[name]

    @property
    def courses(self) -> Collection:
        return self.collection(COURSES)

    @property
    def enrollments(self) -> Collection:
        return self.collection(ENROLLMENTS)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None
