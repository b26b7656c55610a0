"""
Code resolution: registry lookup, redirect decision, click counting.
"""

from dataclasses import dataclass
from typing import Union

from shortlink_app.services.click_tracker import ClickTracker
from shortlink_app.services.link_registry import LinkRegistry

# 301 is cacheable: browsers that cached it will not come back, so
# repeat visits from the same client are not counted.
REDIRECT_STATUS = 301


@dataclass(frozen=True)
class Redirect:
    link_id: int
    location: str
    status_code: int = REDIRECT_STATUS


@dataclass(frozen=True)
class NotFound:
    code: str


RedirectResult = Union[Redirect, NotFound]


class Resolver:
    """
    Turns a short code into a redirect and counts the click.
    
    Flow:
    1. Look up the code in the registry (raises LinkLookupError on DB failure)
    2. Unknown code -> NotFound, counter untouched
    3. Known code -> schedule the increment and return the redirect
       without waiting for it
    """
    
    def __init__(self, registry: LinkRegistry, tracker: ClickTracker):
        self.registry = registry
        self.tracker = tracker

    async def resolve(self, code: str) -> RedirectResult:
        link = await self.registry.lookup(code)
        if link is None:
            return NotFound(code=code)
        
        self.tracker.record(link.id)
        return Redirect(link_id=link.id, location=link.original_url)
