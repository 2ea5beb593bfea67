# ============================================
# tracker/selectors/project.py
# ============================================
from typing import Optional
from django.db.models import Prefetch, Q, QuerySet
from tracker.models import Project, Task


class ProjectSelector:

    @staticmethod
    def _with_people(queryset: QuerySet) -> QuerySet:
        return queryset.select_related('creator').prefetch_related('members')

    @staticmethod
    def get_project_by_id(project_id: int) -> Optional[Project]:
        """Get single project with creator, members and a task summary"""
        try:
            return ProjectSelector._with_people(Project.objects.all()).prefetch_related(
                Prefetch('tasks', queryset=Task.objects.order_by('-created_at'))
            ).get(id=project_id)
        except Project.DoesNotExist:
            return None

    @staticmethod
    def get_projects_by_user(user_id) -> QuerySet:
        """Get all projects where user is creator or member"""
        return ProjectSelector._with_people(
            Project.objects.filter(
                Q(creator_id=user_id) | Q(members__id=user_id)
            ).distinct()
        ).order_by('-created_at')

    @staticmethod
    def get_accessible_project_ids(user_id, project_ids) -> list:
        """Narrow `project_ids` down to the ones the user can see"""
        return list(
            Project.objects.filter(id__in=project_ids)
            .filter(Q(creator_id=user_id) | Q(members__id=user_id))
            .values_list('id', flat=True)
            .distinct()
        )
