# app/database.py
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from app.core.config import Settings, get_settings

settings = get_settings()


def build_database_url(url: str, ssl_mode: str | None) -> str:
    """
    Append sslmode=<ssl_mode> to Postgres URLs that don't set it already.
    Other backends are returned untouched.
    """
    if not ssl_mode or not url.startswith("postgres") or "sslmode=" in url:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}sslmode={ssl_mode}"


def build_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    Postgres (production):
      - pool_pre_ping=True : validate connections before use
      - pool_size / max_overflow / pool_recycle from settings

    SQLite (local dev + tests):
      - check_same_thread=False: FastAPI runs sync endpoints in a threadpool
      - in-memory databases share a single connection (StaticPool),
        otherwise every connection would see its own empty database
    """
    url = build_database_url(settings.DATABASE_URL, settings.DB_SSL_MODE)

    if make_url(url).get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if make_url(url).database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    return create_engine(
        url,
        echo=False,        # set to True if you want to debug SQL queries
        pool_pre_ping=True,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )


engine = build_engine(settings)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    # Import models so SQLModel metadata is populated before create_all()
    from app.models import user as _user_models  # noqa: F401
    from app.models import product as _product_models  # noqa: F401
    from app.models import cart as _cart_models  # noqa: F401
    from app.models import order as _order_models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
