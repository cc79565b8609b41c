from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from base import Base

# Bound to an engine by configure_engine() when the app starts.
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def configure_engine(database_url):
    """Creates the engine for database_url and binds SessionLocal to it."""
    if database_url.startswith("postgresql"):
        # Keep-alives stop hosted Postgres poolers from dropping idle connections.
        engine = create_engine(
            database_url,
            pool_pre_ping=True,
            connect_args={
                'keepalives': 1,
                'keepalives_idle': 30,
                'keepalives_interval': 10,
                'keepalives_count': 5,
            }
        )
    elif database_url.startswith("sqlite"):
        engine = create_engine(database_url, connect_args={'check_same_thread': False})
    else:
        engine = create_engine(database_url, pool_pre_ping=True)

    SessionLocal.configure(bind=engine)
    return engine


def create_db_tables(engine):
    """Creates any missing tables for the registered models."""
    # Registers the models on Base.metadata.
    import models.post  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
