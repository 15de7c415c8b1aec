"""Generate database sessions"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base


def make_engine(database_url: str) -> Engine:
    # SQLite connections are bound to their creating thread unless told otherwise
    connect_args = (
        {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )
    return create_engine(database_url, connect_args=connect_args)


def init_db(engine: Engine) -> sessionmaker[Session]:
    """Ensure all tables are created and hand back a session factory bound to the engine."""
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autoflush=False, bind=engine)
