"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.membership import MembershipFeatureSettings

__all__ = [
    "MembershipFeatureSettings",
]
