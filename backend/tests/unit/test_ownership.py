"""Unit tests for the ownership guard rules."""

import pytest

from cattery.domain.ownership import DenyReason, Operation, evaluate_ownership


def test_anonymous_actor_is_unauthenticated_even_for_missing_record():
    decision = evaluate_ownership(None, exists=False, owner_id=None, operation=Operation.UPDATE)
    assert decision.allow is False
    assert decision.reason is DenyReason.UNAUTHENTICATED


def test_missing_record_is_not_found_before_ownership():
    decision = evaluate_ownership(7, exists=False, owner_id=None, operation=Operation.DELETE)
    assert decision.allow is False
    assert decision.reason is DenyReason.NOT_FOUND


def test_owner_may_update_without_claim():
    decision = evaluate_ownership(7, exists=True, owner_id=7, operation=Operation.UPDATE)
    assert decision.allow is True
    assert decision.reason is DenyReason.OK
    assert decision.claim is False


def test_update_of_unowned_record_claims_it():
    decision = evaluate_ownership(7, exists=True, owner_id=None, operation=Operation.UPDATE)
    assert decision.allow is True
    assert decision.claim is True


def test_delete_of_unowned_record_is_allowed_without_claim():
    decision = evaluate_ownership(7, exists=True, owner_id=None, operation=Operation.DELETE)
    assert decision.allow is True
    assert decision.claim is False


@pytest.mark.parametrize("operation", [Operation.UPDATE, Operation.DELETE])
def test_other_owner_is_forbidden(operation: Operation):
    decision = evaluate_ownership(7, exists=True, owner_id=8, operation=operation)
    assert decision.allow is False
    assert decision.reason is DenyReason.FORBIDDEN
