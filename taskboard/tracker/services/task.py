# ============================================
# tracker/services/task.py
# ============================================
import logging
from datetime import datetime
from typing import Iterable, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from tracker.models import Project, Task
from tracker.services.access import AccessPolicy, Operation
from tracker.services.task_tags import TaskTagSync

logger = logging.getLogger(__name__)

User = get_user_model()


class TaskService:

    @staticmethod
    def _lock_task(task_id: int, message: str) -> Task:
        task = Task.objects.select_for_update().filter(id=task_id).first()
        if not task:
            raise PermissionDenied(message)
        return task

    @staticmethod
    def _clean_title(title: Optional[str]) -> str:
        if not title or not title.strip():
            raise ValidationError("Title is required")
        return title

    @staticmethod
    def _clean_choice(value: str, choices, label: str) -> str:
        if value not in choices.values:
            raise ValidationError(f"Invalid {label} '{value}'. Use: {', '.join(choices.values)}")
        return value

    @staticmethod
    def _clean_deadline(value) -> Optional[datetime]:
        """Accept a datetime or an ISO-8601 string; naive values use the default timezone"""
        if value is None or value == '':
            return None
        if isinstance(value, str):
            # parse_datetime also takes a bare date
            parsed = parse_datetime(value) if 'T' in value.upper() else None
            if parsed is None:
                raise ValidationError(f"Invalid deadline '{value}'. Expected an ISO-8601 date-time")
            value = parsed
        if timezone.is_naive(value):
            value = timezone.make_aware(value, timezone.get_default_timezone())
        return value

    @staticmethod
    def _clean_project_id(project_id) -> Optional[int]:
        if project_id is None:
            return None
        if not Project.objects.filter(id=project_id).exists():
            raise ValidationError("Project does not exist")
        return project_id

    @staticmethod
    def _clean_assignee_id(assignee_id) -> Optional[int]:
        if assignee_id is None:
            return None
        if not User.objects.filter(id=assignee_id).exists():
            raise ValidationError("Assignee does not exist")
        return assignee_id

    @staticmethod
    @transaction.atomic
    def create_task(
        *,
        creator_id,
        title: str,
        description: Optional[str] = None,
        status: str = Task.Status.TODO,
        priority: str = Task.Priority.MEDIUM,
        deadline=None,
        project_id: Optional[int] = None,
        assignee_id: Optional[int] = None,
        tag_ids: Optional[Iterable[int]] = None,
        new_tag_name: Optional[str] = None
    ) -> Task:
        """Create a task owned by `creator_id`"""

        task = Task(
            title=TaskService._clean_title(title),
            description=description,
            status=TaskService._clean_choice(status or Task.Status.TODO, Task.Status, 'status'),
            priority=TaskService._clean_choice(priority or Task.Priority.MEDIUM, Task.Priority, 'priority'),
            deadline=TaskService._clean_deadline(deadline),
            project_id=TaskService._clean_project_id(project_id),
            assignee_id=TaskService._clean_assignee_id(assignee_id),
            creator_id=creator_id,
        )

        diff = TaskTagSync.compute(None, tag_ids or [], new_tag_name)
        task.save()
        TaskTagSync.apply(task, diff)

        logger.info(
            "[task] created id=%s creator=%s project=%s tags=%s",
            task.id, creator_id, task.project_id, len(diff.to_connect)
        )
        return task

    @staticmethod
    @transaction.atomic
    def update_task(
        *,
        task_id: int,
        user_id,
        **data
    ) -> Task:
        """
        Apply a partial update.

        Keys missing from `data` leave the field alone. `project_id`,
        `assignee_id` and `deadline` set to None clear the field. Tags follow
        `tag_ids` / `new_tag_name` through `TaskTagSync`.
        """

        message = "Not authorized to update this task."
        task = TaskService._lock_task(task_id, message)
        AccessPolicy.enforce(user_id, task, Operation.UPDATE, message=message)

        changed = []

        if 'title' in data:
            task.title = TaskService._clean_title(data['title'])
            changed.append('title')

        if 'description' in data:
            task.description = data['description']
            changed.append('description')

        if 'status' in data and data['status'] is not None:
            task.status = TaskService._clean_choice(data['status'], Task.Status, 'status')
            changed.append('status')

        if 'priority' in data and data['priority'] is not None:
            task.priority = TaskService._clean_choice(data['priority'], Task.Priority, 'priority')
            changed.append('priority')

        if 'deadline' in data:
            task.deadline = TaskService._clean_deadline(data['deadline'])
            changed.append('deadline')

        if 'project_id' in data:
            task.project_id = TaskService._clean_project_id(data['project_id'])
            changed.append('project')

        if 'assignee_id' in data:
            task.assignee_id = TaskService._clean_assignee_id(data['assignee_id'])
            changed.append('assignee')

        diff = TaskTagSync.compute(
            task.id, data.get('tag_ids'), data.get('new_tag_name')
        )

        task.save()
        TaskTagSync.apply(task, diff)

        logger.info(
            "[task] updated id=%s by user=%s fields=%s tags(+%s/-%s)",
            task.id, user_id, changed, len(diff.to_connect), len(diff.to_disconnect)
        )
        return task

    @staticmethod
    @transaction.atomic
    def delete_task(*, task_id: int, user_id) -> dict:
        """Delete task"""

        message = "Not authorized to delete this task."
        task = TaskService._lock_task(task_id, message)
        AccessPolicy.enforce(user_id, task, Operation.DELETE, message=message)

        task.delete()
        logger.info("[task] deleted id=%s by user=%s", task_id, user_id)
        return {'message': "Task deleted successfully"}
