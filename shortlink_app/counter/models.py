"""
Data models for click counter entries.
"""

from pydantic import BaseModel, ConfigDict, Field


class ClickScore(BaseModel):
    """
    Current click count for one link.
    
    Entries exist only for links clicked at least once; any other
    link id implicitly has a score of 0.
    """
    
    link_id: int = Field(..., description="ShortLink.id the clicks belong to")
    score: int = Field(..., ge=0, description="Number of recorded clicks")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "link_id": 42,
                "score": 17
            }
        }
    )
