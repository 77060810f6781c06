# skillswap_pro/database.py - Remote store database configuration
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from skillswap_pro.config import settings

# Database URL loaded from .env via skillswap_pro/config.py
DATABASE_URL = settings.DATABASE_URL


def _create_engine(url: str):
    if str(url).startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


engine = _create_engine(DATABASE_URL)

# Session maker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


# Dependency to get database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
