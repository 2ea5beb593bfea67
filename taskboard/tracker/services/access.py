# ============================================
# tracker/services/access.py
# ============================================
"""
Ownership rules for projects and tasks.

`AccessPolicy.authorize` is a pure decision: it only looks at the ids already
loaded on the entity. `AccessPolicy.enforce` turns a denial into the Django
exception the views translate into a response.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from django.core.exceptions import PermissionDenied, ValidationError
from django.http import Http404

logger = logging.getLogger(__name__)

FORBIDDEN = 'forbidden'
BAD_REQUEST = 'bad request'
NOT_FOUND = 'not found'

CREATOR_REMOVAL_MESSAGE = "Cannot remove the project creator."


class Operation(str, Enum):
    READ = 'read'
    UPDATE = 'update'
    DELETE = 'delete'
    ADD_MEMBER = 'add_member'
    REMOVE_MEMBER = 'remove_member'


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[str] = None

    def __bool__(self):
        return self.allowed


ALLOW = Decision(allowed=True)


def deny(reason: str) -> Decision:
    return Decision(allowed=False, reason=reason)


class AccessPolicy:

    CREATOR_ONLY = {
        Operation.UPDATE,
        Operation.DELETE,
        Operation.ADD_MEMBER,
        Operation.REMOVE_MEMBER,
    }

    @staticmethod
    def _same_user(left, right) -> bool:
        return left is not None and right is not None and str(left) == str(right)

    @staticmethod
    def authorize(
        actor_id,
        entity,
        operation: Operation,
        *,
        target_user_id=None
    ) -> Decision:
        """Decide whether `actor_id` may run `operation` on a project or task"""

        if operation == Operation.REMOVE_MEMBER:
            # The creator stays a member no matter who asks.
            if AccessPolicy._same_user(target_user_id, entity.creator_id):
                return deny(BAD_REQUEST)

        if operation in AccessPolicy.CREATOR_ONLY:
            if AccessPolicy._same_user(entity.creator_id, actor_id):
                return ALLOW
            return deny(FORBIDDEN)

        if operation == Operation.READ:
            if AccessPolicy._same_user(entity.creator_id, actor_id):
                return ALLOW
            if any(AccessPolicy._same_user(member_id, actor_id) for member_id in entity.member_ids):
                return ALLOW
            return deny(NOT_FOUND)

        raise ValueError(f"Unknown operation: {operation}")

    @staticmethod
    def enforce(
        actor_id,
        entity,
        operation: Operation,
        *,
        message: str = '',
        target_user_id=None
    ) -> None:
        """Raise the exception matching a denied decision"""

        decision = AccessPolicy.authorize(
            actor_id, entity, operation, target_user_id=target_user_id
        )
        if decision:
            return

        logger.warning(
            "[access] denied actor=%s op=%s entity=%s#%s reason=%s",
            actor_id, operation.value, type(entity).__name__,
            getattr(entity, 'id', None), decision.reason
        )

        if decision.reason == BAD_REQUEST:
            raise ValidationError(CREATOR_REMOVAL_MESSAGE)
        if decision.reason == NOT_FOUND:
            raise Http404(message or "Not found.")
        raise PermissionDenied(message or "Forbidden.")
