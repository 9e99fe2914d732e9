"""Ghost payload models: webhook bodies and Admin API member records."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MemberStatus(str, Enum):
    """Ghost membership status."""

    FREE = "free"
    PAID = "paid"
    COMPED = "comped"


class GhostMember(BaseModel):
    """Member record as returned by the Ghost Admin API."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    email: str
    name: Optional[str] = None
    status: MemberStatus


class GhostMemberFields(BaseModel):
    """Member fields as they appear in a webhook body.

    Every field is optional: ``previous`` only lists the fields that changed,
    and ``current`` is sparse for deletions.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    status: Optional[MemberStatus] = None

    @property
    def is_empty(self) -> bool:
        """True when the webhook sent no fields at all (``{}``)."""
        return not self.model_dump(exclude_unset=True)


class GhostMemberState(BaseModel):
    model_config = ConfigDict(extra="ignore")

    current: GhostMemberFields = Field(default_factory=GhostMemberFields)
    previous: Optional[GhostMemberFields] = None


class GhostWebhookPayload(BaseModel):
    """Body of the member.added / member.updated / member.deleted webhooks."""

    model_config = ConfigDict(extra="ignore")

    member: GhostMemberState = Field(default_factory=GhostMemberState)
