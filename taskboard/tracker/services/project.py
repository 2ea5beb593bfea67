# ============================================
# tracker/services/project.py
# ============================================
import logging
from typing import Iterable, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from tracker.models import Project
from tracker.services.access import AccessPolicy, Operation

logger = logging.getLogger(__name__)

User = get_user_model()


class ProjectService:

    @staticmethod
    def _lock_project(project_id: int, message: str) -> Project:
        """Load the project row for a write, locking it where the backend can"""
        project = Project.objects.select_for_update().filter(id=project_id).first()
        if not project:
            # Missing and foreign projects look the same to the caller.
            raise PermissionDenied(message)
        return project

    @staticmethod
    def _check_users_exist(user_ids: set) -> None:
        found = set(User.objects.filter(id__in=user_ids).values_list('id', flat=True))
        missing = {uid for uid in user_ids if uid not in found}
        if missing:
            raise ValidationError(f"Unknown users: {sorted(missing)}")

    @staticmethod
    @transaction.atomic
    def create_project(
        *,
        creator_id,
        name: str,
        description: Optional[str] = None,
        members: Optional[Iterable] = None
    ) -> Project:
        """Create a project; the creator is always one of its members"""

        if not name or not name.strip():
            raise ValidationError("Project name is required")

        member_ids = set(members or [])
        member_ids.add(creator_id)
        ProjectService._check_users_exist(member_ids)

        project = Project.objects.create(
            name=name,
            description=description,
            creator_id=creator_id
        )
        project.members.add(*member_ids)

        logger.info(
            "[project] created id=%s creator=%s members=%s",
            project.id, creator_id, len(member_ids)
        )
        return project

    @staticmethod
    @transaction.atomic
    def update_project(
        *,
        project_id: int,
        user_id,
        **data
    ) -> Project:
        """Update name/description; only keys present in `data` change"""

        message = "Not authorized to update this project."
        project = ProjectService._lock_project(project_id, message)
        AccessPolicy.enforce(user_id, project, Operation.UPDATE, message=message)

        if 'name' in data:
            name = data['name']
            if not name or not name.strip():
                raise ValidationError("Project name is required")
            project.name = name

        if 'description' in data:
            project.description = data['description']

        project.save()
        logger.info("[project] updated id=%s by user=%s fields=%s", project.id, user_id, sorted(data))
        return project

    @staticmethod
    @transaction.atomic
    def delete_project(*, project_id: int, user_id) -> dict:
        """Delete project; its tasks stay, with an empty project reference"""

        message = "Not authorized to delete this project."
        project = ProjectService._lock_project(project_id, message)
        AccessPolicy.enforce(user_id, project, Operation.DELETE, message=message)

        project.delete()
        logger.info("[project] deleted id=%s by user=%s", project_id, user_id)
        return {'message': "Project deleted successfully"}

    @staticmethod
    @transaction.atomic
    def add_member(*, project_id: int, user_id, member_id) -> Project:
        """Add member to project"""

        message = "Only project creator can add members."
        project = ProjectService._lock_project(project_id, message)
        AccessPolicy.enforce(user_id, project, Operation.ADD_MEMBER, message=message)

        ProjectService._check_users_exist({member_id})

        # add() skips rows that already exist
        project.members.add(member_id)
        logger.info("[project] id=%s member added=%s", project.id, member_id)
        return project

    @staticmethod
    @transaction.atomic
    def remove_member(*, project_id: int, user_id, member_id) -> Project:
        """Remove member from project"""

        message = "Only project creator can remove members."
        project = ProjectService._lock_project(project_id, message)
        AccessPolicy.enforce(
            user_id, project, Operation.REMOVE_MEMBER,
            message=message, target_user_id=member_id
        )

        project.members.remove(member_id)
        logger.info("[project] id=%s member removed=%s", project.id, member_id)
        return project
