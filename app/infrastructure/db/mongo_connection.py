"""
MongoDB connection with an observable readiness state.

``MongoClient`` connects lazily and reconnects on its own, so the readiness
state is driven by the driver's server heartbeat events: a successful
heartbeat marks the connection READY, a failed one takes it out of READY.
The initial ``connect()`` call runs a ``ping`` so the state is known before
the server starts accepting requests.
"""

import logging
import threading
from typing import Callable, List, Optional

from pymongo import MongoClient, monitoring
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.domain.ports import DatabaseConnection
from app.domain.value_objects import ReadinessState


logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "books"


class _HeartbeatListener(monitoring.ServerHeartbeatListener):
    """Forwards heartbeat outcomes to the owning connection."""

    def __init__(self, connection: "MongoConnection") -> None:
        self._connection = connection

    def started(self, event: monitoring.ServerHeartbeatStartedEvent) -> None:
        pass

    def succeeded(self, event: monitoring.ServerHeartbeatSucceededEvent) -> None:
        self._connection._mark_ready()

    def failed(self, event: monitoring.ServerHeartbeatFailedEvent) -> None:
        self._connection._mark_unreachable(event.reply)


class MongoConnection(DatabaseConnection):
    """
    Owns the process-wide ``MongoClient`` and tracks its readiness.

    Callbacks registered with ``when_ready()`` run exactly once, the first
    time the connection reaches READY (immediately if it already has).
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_ms: int = 5000,
        client_factory: Callable[..., MongoClient] = MongoClient,
    ) -> None:
        """
        Args:
            url: MongoDB connection string; its path names the database
            timeout_ms: Server selection timeout for the initial ping
            client_factory: Constructor for the client (injectable for tests)
        """
        self._url = url
        self._timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client: Optional[MongoClient] = None
        self._state = ReadinessState.DISCONNECTED
        self._lock = threading.Lock()
        self._ready_callbacks: List[Callable[[], object]] = []
        self._has_been_ready = False

    @property
    def state(self) -> ReadinessState:
        return self._state

    def is_ready(self) -> bool:
        return self._state is ReadinessState.READY

    def connect(self) -> ReadinessState:
        """
        Create the client and ping the server once.

        A failed ping is not fatal: the state becomes FAILED and the driver
        keeps monitoring the server in the background. An invalid connection
        string raises from the client constructor.

        Returns:
            The readiness state after the ping
        """
        with self._lock:
            self._state = ReadinessState.CONNECTING

        self._client = self._client_factory(
            self._url,
            serverSelectionTimeoutMS=self._timeout_ms,
            event_listeners=[_HeartbeatListener(self)],
        )

        try:
            self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB not reachable at startup: %s", e)
            with self._lock:
                self._state = ReadinessState.FAILED
            return self._state

        self._mark_ready()
        return self._state

    def when_ready(self, callback: Callable[[], object]) -> None:
        """
        Run ``callback`` once the connection is (or becomes) READY.

        When already ready the callback runs synchronously and its errors
        propagate to the caller.
        """
        with self._lock:
            if not self._has_been_ready:
                self._ready_callbacks.append(callback)
                return
        callback()

    def get_collection(self, name: str) -> Collection:
        """
        Get a collection from the URL's database (``books`` if unspecified).

        Raises:
            RuntimeError: If ``connect()`` has not been called
        """
        if self._client is None:
            raise RuntimeError("MongoDB client is not initialized; call connect() first")
        return self._client.get_default_database(default=DEFAULT_DATABASE)[name]

    def close(self) -> None:
        """Close the client and mark the connection DISCONNECTED."""
        if self._client is not None:
            self._client.close()
            self._client = None
        with self._lock:
            self._state = ReadinessState.DISCONNECTED
        logger.info("MongoDB connection closed")

    def _mark_ready(self) -> None:
        with self._lock:
            previous = self._state
            self._state = ReadinessState.READY
            callbacks: List[Callable[[], object]] = []
            if not self._has_been_ready:
                self._has_been_ready = True
                callbacks, self._ready_callbacks = self._ready_callbacks, []

        if previous is not ReadinessState.READY:
            logger.info("MongoDB connection ready (was %s)", previous.value)

        for callback in callbacks:
            callback()

    def _mark_unreachable(self, reason: object) -> None:
        with self._lock:
            previous = self._state
            if previous is ReadinessState.DISCONNECTED:
                return
            self._state = (
                ReadinessState.DISCONNECTED
                if previous is ReadinessState.READY
                else ReadinessState.FAILED
            )

        if previous is not self._state:
            logger.warning(
                "MongoDB connection lost (%s -> %s): %s",
                previous.value,
                self._state.value,
                reason,
            )
