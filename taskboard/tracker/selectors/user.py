# ============================================
# tracker/selectors/user.py
# ============================================
from typing import Optional
from django.contrib.auth import get_user_model
from django.db.models import QuerySet

User = get_user_model()


class UserSelector:

    @staticmethod
    def get_user_by_id(user_id) -> Optional[User]:
        try:
            return User.objects.get(id=user_id)
        except User.DoesNotExist:
            return None

    @staticmethod
    def get_users_list() -> QuerySet:
        """Users offered as assignees and project members"""
        return User.objects.only('id', 'name', 'email').order_by('name')
