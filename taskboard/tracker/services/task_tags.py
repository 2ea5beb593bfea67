# ============================================
# tracker/services/task_tags.py
# ============================================
"""
Keeps a task's tag set in line with the set the caller asked for.

The diff is plain set arithmetic against a fresh read of the stored tags:

    to_connect    = desired - current
    to_disconnect = current - desired

`new_tag_name` (created on demand) is connected when the task does not
carry it yet and kept when it does.
"""
from dataclasses import dataclass, field
from typing import Iterable, Optional

from django.core.exceptions import ValidationError

from tracker.models import Tag, Task
from tracker.services.tag import TagService


@dataclass(frozen=True)
class TagDiff:
    to_connect: frozenset = field(default_factory=frozenset)
    to_disconnect: frozenset = field(default_factory=frozenset)

    def is_empty(self) -> bool:
        return not self.to_connect and not self.to_disconnect


class TaskTagSync:

    @staticmethod
    def current_tag_ids(task_id: Optional[int]) -> set:
        if task_id is None:
            return set()
        return set(
            Task.tags.through.objects
            .filter(task_id=task_id)
            .values_list('tag_id', flat=True)
        )

    @staticmethod
    def _validate_tag_ids(tag_ids: set) -> None:
        if not tag_ids:
            return
        found = set(Tag.objects.filter(id__in=tag_ids).values_list('id', flat=True))
        missing = tag_ids - found
        if missing:
            raise ValidationError(f"Unknown tag ids: {sorted(missing)}")

    @staticmethod
    def diff(current: Iterable[int], desired: Optional[Iterable[int]]) -> TagDiff:
        """Set difference between stored and requested tags"""
        current = set(current)
        if desired is None:
            return TagDiff()
        desired = set(desired)
        return TagDiff(
            to_connect=frozenset(desired - current),
            to_disconnect=frozenset(current - desired),
        )

    @staticmethod
    def compute(
        task_id: Optional[int],
        desired_tag_ids: Optional[Iterable[int]],
        new_tag_name: Optional[str] = None
    ) -> TagDiff:
        """
        Work out which tags to attach and detach.

        `desired_tag_ids=None` means the caller did not send tags at all, so
        nothing gets detached. `task_id=None` is a task that is about to be
        created and has no tags yet.
        """
        desired = None if desired_tag_ids is None else set(desired_tag_ids)
        if desired:
            TaskTagSync._validate_tag_ids(desired)

        current = TaskTagSync.current_tag_ids(task_id)
        result = TaskTagSync.diff(current, desired)

        if new_tag_name:
            new_tag_id = TagService.resolve_tag(new_tag_name)
            if new_tag_id in current:
                result = TagDiff(
                    to_connect=result.to_connect,
                    to_disconnect=result.to_disconnect - {new_tag_id},
                )
            else:
                result = TagDiff(
                    to_connect=result.to_connect | {new_tag_id},
                    to_disconnect=result.to_disconnect,
                )

        return result

    @staticmethod
    def apply(task: Task, diff: TagDiff) -> None:
        if diff.to_connect:
            task.tags.add(*diff.to_connect)
        if diff.to_disconnect:
            task.tags.remove(*diff.to_disconnect)
