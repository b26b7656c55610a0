from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shortlink_app.database.connection import Base


class ShortLink(Base):
    """
    A short code and the URL it redirects to.
    
    Rows are immutable once created. The unique constraint on `code`
    is what turns a second create for the same code into a duplicate error.
    """
    __tablename__ = "short_links"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Note: unique=True automatically creates an index
    code = Column(String, unique=True, nullable=False, index=True)
    original_url = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
