"""
FastAPI dependencies for dependency injection.

Long-lived resources (database, counter store, click tracker) are built
once by the application lifespan and kept on app.state. These functions
hand them to routes, and assemble the request-scoped services on top.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from shortlink_app.counter.strategies import ClickCounterStrategy
from shortlink_app.database.connection import get_db
from shortlink_app.services.click_tracker import ClickTracker
from shortlink_app.services.leaderboard import LeaderboardReporter
from shortlink_app.services.link_registry import LinkRegistry
from shortlink_app.services.resolver import Resolver


def get_counter(request: Request) -> ClickCounterStrategy:
    """Counter store created at startup"""
    return request.app.state.counter


def get_click_tracker(request: Request) -> ClickTracker:
    """Click tracker created at startup"""
    return request.app.state.click_tracker


def get_link_registry(db: Session = Depends(get_db)) -> LinkRegistry:
    return LinkRegistry(db)


def get_resolver(
    registry: LinkRegistry = Depends(get_link_registry),
    tracker: ClickTracker = Depends(get_click_tracker)
) -> Resolver:
    """
    Get Resolver with registry and tracker injected.
    
    Controller depends on service, service depends on infrastructure.
    Tests override get_link_registry or get_counter instead of patching.
    """
    return Resolver(registry=registry, tracker=tracker)


def get_leaderboard_reporter(
    counter: ClickCounterStrategy = Depends(get_counter)
) -> LeaderboardReporter:
    return LeaderboardReporter(counter)
