import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from shortlink_app.errors import DuplicateCodeError, LinkLookupError, LinkRegistryError
from shortlink_app.models.link import ShortLink

logger = logging.getLogger(__name__)


class LinkRegistry:
    """
    Persistent mapping of code -> (id, original_url).
    
    Wraps a request-scoped SQLAlchemy session. Database failures are
    translated into the service error taxonomy so callers never see
    SQLAlchemy exceptions.
    
    The session is synchronous, so every query runs in the threadpool:
    a slow database suspends only the awaiting request, never the event loop.
    """
    
    def __init__(self, db: Session):
        self.db = db

    async def lookup(self, code: str) -> Optional[ShortLink]:
        """
        Find the link registered under `code`.
        
        Returns:
            ShortLink or None if the code is unknown
            
        Raises:
            LinkLookupError: If the database query fails
        """
        try:
            return await run_in_threadpool(self._lookup, code)
        except SQLAlchemyError as e:
            raise LinkLookupError(f"Lookup of code {code!r} failed") from e

    async def create(self, code: str, url: str) -> int:
        """
        Register a new link.
        
        Returns:
            The new link id
            
        Raises:
            DuplicateCodeError: If the code is already taken
            LinkRegistryError: On any other database failure
        """
        link_id = await run_in_threadpool(self._create, code, url)
        logger.info("Registered link %s -> %s (id=%s)", code, url, link_id)
        return link_id

    async def list_links(self) -> List[ShortLink]:
        """All links, newest first (id breaks ties within the same second)"""
        try:
            return await run_in_threadpool(self._list_links)
        except SQLAlchemyError as e:
            raise LinkRegistryError("Could not list links") from e

    def _lookup(self, code: str) -> Optional[ShortLink]:
        return self.db.query(ShortLink).filter(ShortLink.code == code).first()

    def _create(self, code: str, url: str) -> int:
        link = ShortLink(code=code, original_url=url)
        try:
            self.db.add(link)
            self.db.commit()
            self.db.refresh(link)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateCodeError(code) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise LinkRegistryError(f"Could not create link {code!r}") from e
        return link.id

    def _list_links(self) -> List[ShortLink]:
        return (
            self.db.query(ShortLink)
            .order_by(ShortLink.created_at.desc(), ShortLink.id.desc())
            .all()
        )
