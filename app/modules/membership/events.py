"""Classification of Ghost member webhooks into membership events."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import ValidationError

from models.ghost import GhostWebhookPayload, MemberStatus
from modules.membership.errors import InvalidPayloadError
from modules.membership.identity_mapping import normalize_email


class MembershipEventKind(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class MembershipEvent:
    """A classified membership change.

    Attributes:
        kind: added, updated or deleted
        email: normalized member email
        current_status: status after the change
        previous_status: status before the change, set for updates only
    """

    kind: MembershipEventKind
    email: str
    current_status: MemberStatus
    previous_status: Optional[MemberStatus] = None

    @property
    def is_deletion(self) -> bool:
        return self.kind is MembershipEventKind.DELETED


def parse_membership_event(payload: Any, deleted: bool = False) -> MembershipEvent:
    """Validate a webhook body and classify it.

    An update whose ``previous`` block is missing or empty is an add. Ghost
    only lists changed fields in ``previous``, so an update that did not
    touch ``status`` keeps the current status as its previous one.

    Deletions carry the member in ``previous`` with an empty ``current``,
    so the email and status fall back to ``previous`` for them.

    Raises:
        InvalidPayloadError: if the body does not describe a member with an email.
    """
    try:
        parsed = GhostWebhookPayload.model_validate(payload)
    except ValidationError as e:
        raise InvalidPayloadError(
            f"Invalid payload: {_describe_validation_error(e)}"
        ) from e

    current = parsed.member.current
    previous = parsed.member.previous
    has_previous = previous is not None and not previous.is_empty

    email = current.email
    status = current.status
    if deleted and previous is not None:
        email = email or previous.email
        status = status or previous.status

    if not email or not email.strip():
        raise InvalidPayloadError("Invalid payload: missing member.current.email")

    current_status = status or MemberStatus.FREE

    if deleted:
        return MembershipEvent(
            kind=MembershipEventKind.DELETED,
            email=normalize_email(email),
            current_status=current_status,
        )

    if not has_previous:
        return MembershipEvent(
            kind=MembershipEventKind.ADDED,
            email=normalize_email(email),
            current_status=current_status,
        )

    return MembershipEvent(
        kind=MembershipEventKind.UPDATED,
        email=normalize_email(email),
        current_status=current_status,
        previous_status=previous.status or current_status,
    )


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if first.get("type") == "missing":
        return f"missing {location}"
    return f"invalid {location}" if location else "malformed body"
