"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Avatar(BaseModel):
    """Avatar image URLs in three sizes."""

    large: str
    medium: str
    small: str


class UserSummary(BaseModel):
    """Public profile attached to freshly created replies."""

    id: int
    username: str
    nickname: str
    avatar: Avatar = Field(..., description="Avatar URLs derived from the stored image path")

    model_config = ConfigDict(from_attributes=True)
