from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx produced by the error handlers, e.g. {"message": "Not found"}"""
    message: str


INTERNAL_ERROR_RESPONSE = {500: {"model": ErrorResponse, "description": "Registry or counter store failure"}}
