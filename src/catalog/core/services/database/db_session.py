"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, config: ConfigData | None = None):
        """Initialize the shared database engine and session factory."""

        logger.info("Setting up database engine and session factory")
        main_config = config or get_config()
        db_config = main_config.database

        engine_kwargs: dict = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(main_config),
        }

        if db_config.url.startswith("sqlite"):
            if ":memory:" in db_config.url:
                # A single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        logger.info("Initializing database engine for environment: {}", main_config.app.environment)
        self._engine = create_engine(db_config.url, **engine_kwargs)

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if "postgresql" in config.database.url:
            connect_args.update(
                {
                    "application_name": f"{config.app.environment}_catalog",
                    "connect_timeout": 30,
                }
            )

        elif "sqlite" in config.database.url:
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": 20,
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    @property
    def engine(self):
        return self._engine

    def create_all(self) -> None:
        """Create all catalog tables."""
        from src.catalog.entities.service.category import CategoryTable  # noqa: F401
        from src.catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session and always close it, rolling back on database errors."""
        db = self.get_session()
        try:
            yield db
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Rolled back database session after {}: {}", type(exc).__name__, exc)
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as exc:
            logger.error("Database health check failed: {}", exc)
            return False

    def dispose(self) -> None:
        self._engine.dispose()
