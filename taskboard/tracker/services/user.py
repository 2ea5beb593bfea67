# ============================================
# tracker/services/user.py
# ============================================
import logging

from django.http import Http404

from tracker.selectors.user import UserSelector

logger = logging.getLogger(__name__)


class UserService:

    @staticmethod
    def get_profile(*, user_id):
        user = UserSelector.get_user_by_id(user_id)
        if not user:
            raise Http404("User profile not found.")
        return user

    @staticmethod
    def update_profile(*, user_id, **data):
        """Self-service profile update; only the display name is editable"""
        user = UserService.get_profile(user_id=user_id)

        if 'name' in data:
            user.name = data['name']
            user.save(update_fields=['name'])
            logger.info("[user] profile updated id=%s", user.id)

        return user
