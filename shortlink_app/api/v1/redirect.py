from fastapi import APIRouter, Depends, Path
from fastapi.responses import RedirectResponse
from shortlink_app.errors import LinkNotFoundError
from shortlink_app.schemas.error import ErrorResponse, INTERNAL_ERROR_RESPONSE
from shortlink_app.services.resolver import NotFound, Resolver
from shortlink_app.dependencies import get_resolver

router = APIRouter(tags=["redirect"])


@router.get(
    "/{code}",
    status_code=301,
    responses={404: {"model": ErrorResponse, "description": "Unknown code"}, **INTERNAL_ERROR_RESPONSE},
)
async def redirect_to_original_url(
    code: str = Path(..., min_length=3),
    resolver: Resolver = Depends(get_resolver)
):
    """
    Redirect to the original URL.
    
    Flow:
    1. Look up the code in the registry
    2. Schedule the click increment (fire and forget)
    3. Redirect immediately, whether or not the increment has finished
    
    A failing counter store never turns a redirect into an error.
    """
    result = await resolver.resolve(code)
    
    if isinstance(result, NotFound):
        raise LinkNotFoundError(result.code)
    
    return RedirectResponse(url=result.location, status_code=result.status_code)
