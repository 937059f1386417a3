import logging
import threading
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import DBAPIError, InvalidRequestError, SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.elements import TextClause
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.core import config

logger = logging.getLogger(__name__)

Base = declarative_base()


class ConnectionState(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


def build_database_url() -> Union[str, URL]:
    if config.DATABASE_URL:
        return config.DATABASE_URL
    return URL.create(
        config.DB_DRIVER,
        username=config.DB_USER,
        password=config.DB_PASSWORD or None,
        host=config.DB_HOST,
        port=config.DB_PORT,
        database=config.DB_NAME,
    )


class ConnectionManager:
    """Owns the pooled engine used for every read against the store.

    The engine is built lazily by ``connect()`` so a bad or unreachable store
    never stops the process from starting; the manager just reports itself
    as disconnected until a later ``ensure_connected()`` succeeds.
    """

    def __init__(
        self,
        url: Optional[Union[str, URL]] = None,
        pool_size: int = config.DB_POOL_SIZE,
        max_overflow: int = config.DB_MAX_OVERFLOW,
        pool_timeout: int = config.DB_POOL_TIMEOUT,
        connect_attempts: int = config.DB_CONNECT_ATTEMPTS,
        backoff_max: int = config.DB_CONNECT_BACKOFF_MAX,
        backoff_multiplier: float = 0.5,
        connect_args: Optional[Dict[str, Any]] = None,
    ):
        self.url = url if url is not None else build_database_url()
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.connect_attempts = max(1, connect_attempts)
        self.backoff_max = backoff_max
        self.backoff_multiplier = backoff_multiplier
        self.connect_args = connect_args or {}
        self._engine: Optional[Engine] = None
        self._state = ConnectionState.DISCONNECTED
        self.last_error: Optional[SQLAlchemyError] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_healthy(self) -> bool:
        return self._state == ConnectionState.CONNECTED

    def _create_engine(self) -> Engine:
        return create_engine(
            self.url,
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_timeout=self.pool_timeout,
            pool_pre_ping=True,
            connect_args=self.connect_args,
        )

    def connect(self, attempts: Optional[int] = None) -> ConnectionState:
        """Open the pool and verify it with a round trip, retrying with backoff.

        Failures are logged and leave the manager DISCONNECTED; nothing is raised.
        """
        with self._lock:
            try:
                if self._engine is None:
                    self._engine = self._create_engine()
                for attempt in Retrying(
                    retry=retry_if_exception_type(DBAPIError),
                    stop=stop_after_attempt(attempts or self.connect_attempts),
                    wait=wait_exponential(multiplier=self.backoff_multiplier, max=self.backoff_max),
                    before_sleep=before_sleep_log(logger, logging.WARNING),
                    reraise=True,
                ):
                    with attempt:
                        with self._engine.connect() as conn:
                            conn.execute(text("SELECT 1"))
            except SQLAlchemyError as e:
                logger.error("Error connecting to database: %s", e)
                self.last_error = e
                self._state = ConnectionState.DISCONNECTED
                return self._state

            self._state = ConnectionState.CONNECTED
            self.last_error = None
            logger.info("Successfully connected to database %s", self._engine.url.render_as_string(hide_password=True))
            return self._state

    def ensure_connected(self) -> bool:
        """Single reconnect attempt when the manager is not healthy."""
        if self.is_healthy:
            return True
        logger.warning("Database connection is down, attempting to reconnect")
        return self.connect(attempts=1) == ConnectionState.CONNECTED

    def execute(self, statement: TextClause, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Run a read statement on a pooled connection and return every row."""
        if self._engine is None:
            raise InvalidRequestError("database engine is not initialised")
        try:
            with self._engine.connect() as conn:
                result = conn.execute(statement, params)
                return [dict(row) for row in result.mappings().all()]
        except DBAPIError as e:
            if e.connection_invalidated:
                self._state = ConnectionState.DISCONNECTED
            raise

    def dispose(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
            self._state = ConnectionState.DISCONNECTED
