# ============================================
# tracker/selectors/task.py
# ============================================
from typing import Iterable, Optional
from django.db.models import QuerySet
from tracker.models import Task


class TaskSelector:

    @staticmethod
    def _with_relations(queryset: QuerySet) -> QuerySet:
        return queryset.select_related(
            'project', 'assignee', 'creator'
        ).prefetch_related('tags')

    @staticmethod
    def get_task_by_id(task_id: int) -> Optional[Task]:
        """Get single task with related data"""
        try:
            return TaskSelector._with_relations(Task.objects.all()).get(id=task_id)
        except Task.DoesNotExist:
            return None

    @staticmethod
    def get_tasks_list(
        creator_id,
        project_id: int = None,
        status: str = None,
        assignee_id: int = None
    ) -> QuerySet:
        """Tasks created by `creator_id`, optionally narrowed by the filters"""
        queryset = TaskSelector._with_relations(
            Task.objects.filter(creator_id=creator_id)
        )

        if project_id:
            queryset = queryset.filter(project_id=project_id)

        if status:
            queryset = queryset.filter(status=status)

        if assignee_id:
            queryset = queryset.filter(assignee_id=assignee_id)

        return queryset.order_by('-created_at')

    @staticmethod
    def get_tasks_for_projects(project_ids: Iterable[int]) -> QuerySet:
        """Every task in the given projects, whoever created it"""
        return TaskSelector._with_relations(
            Task.objects.filter(project_id__in=list(project_ids))
        ).order_by('-created_at')

    @staticmethod
    def get_tasks_assigned_to(user_id) -> QuerySet:
        return TaskSelector._with_relations(
            Task.objects.filter(assignee_id=user_id)
        ).order_by('-created_at')
