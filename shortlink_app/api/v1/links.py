from typing import List

from fastapi import APIRouter, Depends, status
from shortlink_app.schemas.link import LinkCreate, LinkCreated, LinkResponse
from shortlink_app.schemas.error import ErrorResponse, INTERNAL_ERROR_RESPONSE
from shortlink_app.services.link_registry import LinkRegistry
from shortlink_app.dependencies import get_link_registry

router = APIRouter(prefix="/links", tags=["links"])


@router.get("", response_model=List[LinkResponse], responses=INTERNAL_ERROR_RESPONSE)
async def list_links(registry: LinkRegistry = Depends(get_link_registry)):
    """All registered links, newest first"""
    return await registry.list_links()


@router.post(
    "",
    response_model=LinkCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Duplicated code"}, **INTERNAL_ERROR_RESPONSE},
)
async def create_link(
    link_data: LinkCreate,
    registry: LinkRegistry = Depends(get_link_registry)
):
    """Register a code -> URL mapping (400 "Duplicated code" if the code is taken)"""
    link_id = await registry.create(link_data.code, link_data.url)
    return LinkCreated(short_link_id=link_id)
