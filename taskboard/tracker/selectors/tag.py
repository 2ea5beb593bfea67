# ============================================
# tracker/selectors/tag.py
# ============================================
from django.db.models import QuerySet
from tracker.models import Tag


class TagSelector:

    @staticmethod
    def get_tags_list() -> QuerySet:
        return Tag.objects.order_by('name')
