"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of the
relay operations (event reconciliation, linking, collaborator calls) so the
request boundary can decide how to respond.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed (possibly with a benign no-op outcome)
        INVALID_INPUT: Malformed input or missing required field
        UNAUTHORIZED: Trust-boundary failure (secret or signature)
        NOT_FOUND: No mapping or no membership record
        CONFLICT: Mapping invariant violation, nothing was written
        UPSTREAM_UNAVAILABLE: Directory or role-mutation transport failure
    """

    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
