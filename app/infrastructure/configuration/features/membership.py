"""Membership feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class MembershipFeatureSettings(FeatureSettings):
    """Role identifiers managed by the membership relay.

    Both values are opaque identifiers passed through to the role client.

    Environment Variables:
        DISCORD_ROLE_MEMBER: Role granted to every linked member (base tier)
        DISCORD_ROLE_PREMIUM: Role granted to paid and comped members

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        base_role = settings.membership.ROLE_MEMBER
        premium_role = settings.membership.ROLE_PREMIUM
        ```
    """

    ROLE_MEMBER: str = Field(default="", alias="DISCORD_ROLE_MEMBER")
    ROLE_PREMIUM: str = Field(default="", alias="DISCORD_ROLE_PREMIUM")
