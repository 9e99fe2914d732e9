"""Membership relay module.

Keeps Discord roles in line with Ghost membership tiers and maintains the
bidirectional email <-> Discord account mapping.

Components:
- events: validated parse of Ghost member webhooks into classified events
- reconciler: applies the tier transition table to a mapped account
- linking: self-service /link and /unlink protocol
- admin: operator-facing direct mapping management
- commands: Discord slash command dispatch
"""

from modules.membership.admin import MappingAdmin
from modules.membership.commands import handle_command
from modules.membership.events import (
    MembershipEvent,
    MembershipEventKind,
    parse_membership_event,
)
from modules.membership.identity_mapping import IdentityMapping
from modules.membership.linking import LinkManager, LinkOutcome
from modules.membership.reconciler import EventReconciler
from modules.membership.roles import MembershipRoles

__all__ = [
    "EventReconciler",
    "IdentityMapping",
    "LinkManager",
    "LinkOutcome",
    "MappingAdmin",
    "MembershipEvent",
    "MembershipEventKind",
    "MembershipRoles",
    "handle_command",
    "parse_membership_event",
]
