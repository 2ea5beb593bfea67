import pytest
from unittest.mock import patch
from django.core.exceptions import PermissionDenied, ValidationError

from tracker.models import Tag
from tracker.services.tag import TagService


@pytest.mark.django_db
def test_create_tag_is_idempotent():
    first = TagService.create_tag(name="x")
    second = TagService.create_tag(name="x")

    assert first.id == second.id
    assert Tag.objects.filter(name="x").count() == 1


@pytest.mark.django_db
def test_resolve_tag_returns_existing_or_new_id(tags):
    assert TagService.resolve_tag("backend") == tags["backend"].id

    new_id = TagService.resolve_tag("docs")
    assert Tag.objects.get(id=new_id).name == "docs"


@pytest.mark.django_db
@pytest.mark.parametrize("name", ["", "x" * 51])
def test_create_tag_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        TagService.create_tag(name=name)


@pytest.mark.django_db
def test_create_tag_recovers_from_concurrent_insert():
    winner = Tag.objects.create(name="race")

    # Lookup misses as if the other request had not committed yet.
    with patch("tracker.services.tag.Tag.objects.filter") as lookup:
        lookup.return_value.first.return_value = None
        tag = TagService.create_tag(name="race")

    assert tag.id == winner.id
    assert Tag.objects.filter(name="race").count() == 1


@pytest.mark.django_db
def test_delete_tag(tags):
    result = TagService.delete_tag(tag_id=tags["infra"].id)

    assert result == {'message': "Tag deleted successfully"}
    assert not Tag.objects.filter(name="infra").exists()


@pytest.mark.django_db
def test_delete_missing_tag_is_forbidden():
    with pytest.raises(PermissionDenied):
        TagService.delete_tag(tag_id=12345)
