"""Request bodies of the administrative mapping endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class LinkCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    discord_user_id: Optional[str] = None


class LinkDeleteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
