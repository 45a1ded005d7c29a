"""Database engine construction and session dependency"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the SQLAlchemy engine (and its connection pool) for the app"""
    if not database_url:
        raise ValueError(
            "DATABASE_URL or the MYSQL_* environment variables must be set "
            "(MYSQL_HOST, MYSQL_USER, MYSQL_PASSWORD, MYSQL_DATABASE)."
        )
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def create_tables(engine: Engine) -> None:
    """Create every table known to the SQLModel metadata"""
    # Import for side effect: registers the table models on the metadata
    import tedx_ndu.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_db(request: Request):
    """Get database session bound to the application's engine"""
    with Session(request.app.state.engine) as session:
        yield session
