from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func
from url_shortener.database.connection import Base


class ShortUrl(Base):
    """
    Alias -> long URL mapping used by SQLAlchemyDataProvider.

    The alias is the primary key, so the database itself rejects a second
    row with the same alias. That is what makes put() atomic across
    processes: no "check then insert" race.
    """
    __tablename__ = "short_urls"

    alias = Column(String(64), primary_key=True)
    long_url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
