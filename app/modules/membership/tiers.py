"""Membership tiers derived from Ghost member status."""

from enum import Enum

from models.ghost import MemberStatus


class MembershipTier(str, Enum):
    BASE = "base"
    PREMIUM = "premium"


PREMIUM_STATUSES = frozenset({MemberStatus.PAID, MemberStatus.COMPED})


def tier_of(status: MemberStatus) -> MembershipTier:
    """Paid and comped members are premium, everyone else is base."""
    if status in PREMIUM_STATUSES:
        return MembershipTier.PREMIUM
    return MembershipTier.BASE


def is_premium(status: MemberStatus) -> bool:
    return tier_of(status) is MembershipTier.PREMIUM
