"""
Database engine and session management.

The engine is owned by a Database object created once per application
(see main.create_app) and handed to requests through app.state.
"""

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


class Database:
    """Engine plus session factory for one database URL."""
    
    def __init__(self, url: str):
        connect_args = {}
        if url.startswith("sqlite"):
            # Sessions are used from FastAPI's threadpool as well as the event loop
            connect_args["check_same_thread"] = False
        
        self.url = url
        self.engine = create_engine(url, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
    
    def create_all(self) -> None:
        """Create tables for every registered model"""
        Base.metadata.create_all(bind=self.engine)
    
    def drop_all(self) -> None:
        """Drop all tables (for testing)"""
        Base.metadata.drop_all(bind=self.engine)
    
    def session(self) -> Session:
        return self.SessionLocal()
    
    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """
    FastAPI dependency yielding a session bound to the app's database.
    The session is closed when the request finishes.
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
