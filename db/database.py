# db/database.py
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import sessionmaker

from config.config import Config
from models.user import Base
from utils.errors import UnavailableError

logger = logging.getLogger(__name__)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_unicode_lower(dbapi_connection, connection_record):
    """
    SQLite's built-in lower() folds ASCII only; search relies on lower() for
    case-insensitive matching, so swap in Python's str.lower.
    """
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


class Database:
    """
    Owns the engine and session factory for one app.

    Nothing is opened until connect(); after close() the object goes back to
    the disconnected state. While disconnected every session() call raises
    UnavailableError, which the API reports as 503.
    """

    def __init__(self, url: str = None, app=None):
        self.url = url
        self.engine = None
        self._session_factory = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if self.url is None:
            self.url = app.config.get("DATABASE_URL") or Config.DATABASE_URL
        app.extensions["database"] = self

    @property
    def connected(self) -> bool:
        return self.engine is not None

    def connect(self):
        """Create the engine and make sure the database answers."""
        if self.connected:
            return
        engine_args = {"pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            engine_args["connect_args"] = {"check_same_thread": False}

        engine = create_engine(self.url, echo=False, **engine_args)
        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _register_unicode_lower)
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            engine.dispose()
            raise
        self.engine = engine
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )
        logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))

    def close(self):
        """Dispose the engine. Safe to call more than once."""
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database connection closed.")

    def ping(self) -> bool:
        if not self.connected:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.exception("Database ping failed")
            return False

    @contextmanager
    def session(self):
        """
        Yield a session. Callers commit; anything raised inside rolls back.
        Connectivity failures surface as UnavailableError.
        """
        if not self.connected:
            raise UnavailableError()
        session = self._session_factory()
        try:
            yield session
        except (OperationalError, InterfaceError) as exc:
            session.rollback()
            logger.error("Database operation failed: %s", exc)
            raise UnavailableError() from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self):
        """Create all tables if not exist (basic version)."""
        Base.metadata.create_all(bind=self.engine)

    # -------------------------------------------------------------
    #           SAFE AUTO-MIGRATION (CREATE / PATCH)
    # -------------------------------------------------------------
    def auto_migrate(self):
        """
        Auto-creates missing tables AND auto-adds missing columns on users.
        Does NOT delete data. Safe for local & lightweight usage.
        """
        if not self.connected:
            raise UnavailableError()

        # 1) Ensure tables exist
        Base.metadata.create_all(bind=self.engine)

        # 2) Columns that older databases may be missing
        required_columns = {
            "city": "TEXT NOT NULL DEFAULT ''",
            "experience": "INTEGER NOT NULL DEFAULT 0",
            "portfolio": "TEXT NOT NULL DEFAULT ''",
            "profile_pic": "TEXT NOT NULL DEFAULT ''",
        }

        existing_cols = [col["name"] for col in inspect(self.engine).get_columns("users")]

        # 3) Add missing columns inside a transaction (engine.begin ensures commit)
        with self.engine.begin() as conn:
            for col_name, col_type in required_columns.items():
                if col_name not in existing_cols:
                    logger.warning("[AUTO-MIGRATE] Adding missing column: %s", col_name)
                    conn.execute(text(f"ALTER TABLE users ADD COLUMN {col_name} {col_type}"))

        logger.info("[AUTO-MIGRATE] Schema verified/updated.")


def get_database(app) -> Database:
    return app.extensions["database"]
