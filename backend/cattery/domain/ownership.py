"""Ownership guard: decides which identity may mutate which cat record.

Rules, evaluated in order:

1. no acting identity          -> deny  (``unauthenticated``)
2. record does not exist       -> deny  (``not_found``)
3. record has no owner         -> allow (an update also claims the record)
4. record owned by the actor   -> allow
5. anything else               -> deny  (``forbidden``)

The repository enforces the same rule inside a single conditional
UPDATE/DELETE; this module is consulted afterwards to explain a write
that affected no rows.
"""

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    UPDATE = "update"
    DELETE = "delete"


class DenyReason(str, Enum):
    OK = "ok"
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class OwnershipDecision:
    allow: bool
    reason: DenyReason
    claim: bool = False


def evaluate_ownership(
    actor_id: int | None,
    *,
    exists: bool,
    owner_id: int | None,
    operation: Operation,
) -> OwnershipDecision:
    """Apply the ownership rules to one mutate-or-delete request."""
    if actor_id is None:
        return OwnershipDecision(allow=False, reason=DenyReason.UNAUTHENTICATED)
    if not exists:
        return OwnershipDecision(allow=False, reason=DenyReason.NOT_FOUND)
    if owner_id is None:
        return OwnershipDecision(
            allow=True,
            reason=DenyReason.OK,
            claim=operation is Operation.UPDATE,
        )
    if owner_id == actor_id:
        return OwnershipDecision(allow=True, reason=DenyReason.OK)
    return OwnershipDecision(allow=False, reason=DenyReason.FORBIDDEN)
