from pydantic import BaseModel, Field, ConfigDict


class LeaderboardEntry(BaseModel):
    """One row of the click leaderboard, e.g. {"shortLinkId": 3, "clicks": 12}"""
    short_link_id: int = Field(..., alias="shortLinkId")
    clicks: int = Field(..., ge=0)

    model_config = ConfigDict(populate_by_name=True)
