from types import SimpleNamespace

import pytest
from django.core.exceptions import PermissionDenied, ValidationError
from django.http import Http404

from tracker.services.access import (
    AccessPolicy, Operation, BAD_REQUEST, FORBIDDEN, NOT_FOUND
)


def make_project(creator_id=1, member_ids=(1, 2)):
    return SimpleNamespace(id=10, creator_id=creator_id, member_ids=list(member_ids))


@pytest.mark.parametrize("op", [
    Operation.UPDATE, Operation.DELETE, Operation.ADD_MEMBER,
])
def test_creator_only_operations(op):
    project = make_project()

    assert AccessPolicy.authorize(1, project, op)
    decision = AccessPolicy.authorize(2, project, op)
    assert not decision
    assert decision.reason == FORBIDDEN


def test_task_update_and_delete_are_creator_only():
    task = SimpleNamespace(id=5, creator_id=7)

    assert AccessPolicy.authorize(7, task, Operation.UPDATE)
    assert AccessPolicy.authorize(7, task, Operation.DELETE)
    assert AccessPolicy.authorize(8, task, Operation.UPDATE).reason == FORBIDDEN
    assert AccessPolicy.authorize(8, task, Operation.DELETE).reason == FORBIDDEN


def test_read_allows_creator_and_members_only():
    project = make_project(creator_id=1, member_ids=[2])

    assert AccessPolicy.authorize(1, project, Operation.READ)
    assert AccessPolicy.authorize(2, project, Operation.READ)
    assert AccessPolicy.authorize(3, project, Operation.READ).reason == NOT_FOUND


def test_remove_member_creator_is_bad_request_for_any_actor():
    project = make_project(creator_id=1)

    for actor in (1, 2, 99):
        decision = AccessPolicy.authorize(actor, project, Operation.REMOVE_MEMBER, target_user_id=1)
        assert decision.reason == BAD_REQUEST


def test_remove_member_other_user():
    project = make_project(creator_id=1)

    assert AccessPolicy.authorize(1, project, Operation.REMOVE_MEMBER, target_user_id=2)
    assert AccessPolicy.authorize(2, project, Operation.REMOVE_MEMBER, target_user_id=2).reason == FORBIDDEN


def test_ids_compare_across_str_and_int():
    project = make_project(creator_id=1)
    assert AccessPolicy.authorize("1", project, Operation.UPDATE)


def test_enforce_maps_reasons_to_exceptions():
    project = make_project(creator_id=1, member_ids=[1])

    AccessPolicy.enforce(1, project, Operation.UPDATE)

    with pytest.raises(PermissionDenied, match="Not yours"):
        AccessPolicy.enforce(2, project, Operation.UPDATE, message="Not yours")
    with pytest.raises(Http404):
        AccessPolicy.enforce(2, project, Operation.READ)
    with pytest.raises(ValidationError):
        AccessPolicy.enforce(1, project, Operation.REMOVE_MEMBER, target_user_id=1)
