import logging
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.exc import SQLAlchemyError

from config import Config

logger = logging.getLogger(__name__)

DATABASE_URL = Config.DATABASE_URL

connect_args = {}
if DATABASE_URL.startswith('sqlite'):
    # Flask serves requests from several threads
    connect_args['check_same_thread'] = False

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db():
    """Create any missing tables for the registered models."""
    import models  # noqa: F401 - registers the models with Base
    logger.info("Creating database tables if needed...")
    Base.metadata.create_all(bind=engine)


# Context manager for SQLAlchemy sessions (needed for Flask routes)
@contextmanager
def get_db_session():
    """Provide a transactional scope around a series of SQLAlchemy operations."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"SQLAlchemy Session Error: {e}")
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"General Session Error: {e}")
        raise
    finally:
        db.close()
