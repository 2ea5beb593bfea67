# ============================================
# tracker/services/tag.py
# ============================================
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import IntegrityError, transaction

from tracker.models import Tag

logger = logging.getLogger(__name__)

TAG_NAME_MAX_LENGTH = 50


class TagService:

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name:
            raise ValidationError("Tag name is required")
        if len(name) > TAG_NAME_MAX_LENGTH:
            raise ValidationError(f"Tag name must be at most {TAG_NAME_MAX_LENGTH} characters")

    @staticmethod
    def create_tag(*, name: str) -> Tag:
        """
        Return the tag called `name`, creating it if needed.

        Creating a name that already exists hands back the stored row, so
        repeated calls always yield the same id. Two requests racing on the
        same new name both end up with the row the winner inserted.
        """
        TagService._validate_name(name)

        existing = Tag.objects.filter(name=name).first()
        if existing:
            return existing

        try:
            with transaction.atomic():
                tag = Tag.objects.create(name=name)
        except IntegrityError:
            logger.info("[tag] concurrent create for name=%r, reusing stored row", name)
            return Tag.objects.get(name=name)

        logger.info("[tag] created tag id=%s name=%r", tag.id, name)
        return tag

    @staticmethod
    def resolve_tag(name: str) -> int:
        """Map a tag name to its id"""
        return TagService.create_tag(name=name).id

    @staticmethod
    def delete_tag(*, tag_id: int) -> dict:
        """Delete a tag; any user may delete any existing tag"""

        tag = Tag.objects.filter(id=tag_id).first()
        if not tag:
            raise PermissionDenied("Not authorized to delete this Tag.")

        tag.delete()
        logger.info("[tag] deleted tag id=%s", tag_id)
        return {'message': "Tag deleted successfully"}
