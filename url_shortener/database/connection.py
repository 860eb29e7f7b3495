"""
SQLAlchemy engine and session setup for the relational data provider.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from url_shortener.config import settings


def build_engine(database_url: str):
    """Create an engine; SQLite needs check_same_thread off for FastAPI threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
