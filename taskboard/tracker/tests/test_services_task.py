from datetime import datetime, timezone as dt_timezone

import pytest
from django.core.exceptions import PermissionDenied, ValidationError

from tracker.models import Tag, Task
from tracker.selectors.task import TaskSelector
from tracker.services.task import TaskService


@pytest.mark.django_db
def test_create_task_defaults(alice):
    task = TaskService.create_task(creator_id=alice.id, title="Plain")

    assert task.status == Task.Status.TODO
    assert task.priority == Task.Priority.MEDIUM
    assert task.deadline is None
    assert task.project_id is None
    assert task.assignee_id is None
    assert task.creator_id == alice.id
    assert task.tags.count() == 0


@pytest.mark.django_db
def test_create_task_with_relations(alice, bob, project, tags):
    task = TaskService.create_task(
        creator_id=alice.id,
        title="Ship it",
        status=Task.Status.IN_PROGRESS,
        priority=Task.Priority.URGENT,
        deadline="2026-11-01T09:30:00Z",
        project_id=project.id,
        assignee_id=bob.id,
        tag_ids=[tags["backend"].id],
    )

    assert task.deadline == datetime(2026, 11, 1, 9, 30, tzinfo=dt_timezone.utc)
    assert task.project_id == project.id
    assert task.assignee_id == bob.id
    assert list(task.tags.values_list("name", flat=True)) == ["backend"]


@pytest.mark.django_db
def test_new_tag_name_is_reused_across_tasks(alice):
    first = TaskService.create_task(creator_id=alice.id, title="Write docs", tag_ids=[], new_tag_name="urgent")
    second = TaskService.create_task(creator_id=alice.id, title="Review docs", new_tag_name="urgent")

    assert [t.name for t in first.tags.all()] == ["urgent"]
    assert list(first.tags.values_list("id", flat=True)) == list(second.tags.values_list("id", flat=True))
    assert Tag.objects.filter(name="urgent").count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("kwargs", [
    {"title": ""},
    {"title": "ok", "status": "ARCHIVED"},
    {"title": "ok", "priority": "CRITICAL"},
    {"title": "ok", "deadline": "next tuesday"},
    {"title": "ok", "deadline": "2026-11-01"},
    {"title": "ok", "project_id": 987654},
    {"title": "ok", "assignee_id": 987654},
    {"title": "ok", "tag_ids": [987654]},
])
def test_create_task_validation(alice, kwargs):
    with pytest.raises(ValidationError):
        TaskService.create_task(creator_id=alice.id, **kwargs)
    assert not Task.objects.exists()


@pytest.mark.django_db
def test_update_task_partial(alice, bob, task):
    TaskService.update_task(task_id=task.id, user_id=alice.id, status=Task.Status.DONE, assignee_id=bob.id)

    task.refresh_from_db()
    assert task.status == Task.Status.DONE
    assert task.assignee_id == bob.id
    assert task.title == "Write docs"
    assert task.project_id is not None
    assert task.tags.count() == 2


@pytest.mark.django_db
def test_update_task_any_status_transition(alice, task):
    for status in (Task.Status.DONE, Task.Status.TODO, Task.Status.BLOCKED, Task.Status.IN_PROGRESS):
        TaskService.update_task(task_id=task.id, user_id=alice.id, status=status)
        task.refresh_from_db()
        assert task.status == status


@pytest.mark.django_db
def test_update_task_null_disconnects(alice, bob, task):
    task.assignee = bob
    task.deadline = datetime(2026, 1, 1, tzinfo=dt_timezone.utc)
    task.save()

    TaskService.update_task(task_id=task.id, user_id=alice.id, project_id=None, assignee_id=None, deadline=None)

    task.refresh_from_db()
    assert task.project_id is None
    assert task.assignee_id is None
    assert task.deadline is None


@pytest.mark.django_db
def test_update_task_syncs_tags(alice, task, tags):
    TaskService.update_task(
        task_id=task.id, user_id=alice.id,
        tag_ids=[tags["frontend"].id, tags["infra"].id], new_tag_name="urgent"
    )

    assert set(task.tags.values_list("name", flat=True)) == {"frontend", "infra", "urgent"}


@pytest.mark.django_db
def test_update_by_other_user_is_forbidden_and_changes_nothing(bob, task):
    with pytest.raises(PermissionDenied):
        TaskService.update_task(task_id=task.id, user_id=bob.id, title="Hijacked", tag_ids=[])

    task.refresh_from_db()
    assert task.title == "Write docs"
    assert task.tags.count() == 2


@pytest.mark.django_db
def test_failed_update_rolls_back(alice, task):
    with pytest.raises(ValidationError):
        TaskService.update_task(task_id=task.id, user_id=alice.id, title="Renamed", tag_ids=[424242])

    task.refresh_from_db()
    assert task.title == "Write docs"


@pytest.mark.django_db
def test_delete_task(alice, bob, task):
    with pytest.raises(PermissionDenied):
        TaskService.delete_task(task_id=task.id, user_id=bob.id)

    assert TaskService.delete_task(task_id=task.id, user_id=alice.id) == {'message': "Task deleted successfully"}
    assert not Task.objects.filter(id=task.id).exists()

    with pytest.raises(PermissionDenied):
        TaskService.delete_task(task_id=task.id, user_id=alice.id)


@pytest.mark.django_db
def test_list_is_scoped_to_creator_and_filtered(alice, bob, project):
    mine = TaskService.create_task(creator_id=alice.id, title="Mine", project_id=project.id, assignee_id=bob.id)
    TaskService.create_task(creator_id=alice.id, title="Mine, loose", status=Task.Status.DONE)
    TaskService.create_task(creator_id=bob.id, title="Bob's", project_id=project.id)

    assert {t.title for t in TaskSelector.get_tasks_list(alice.id)} == {"Mine", "Mine, loose"}
    assert [t.id for t in TaskSelector.get_tasks_list(alice.id, project_id=project.id, assignee_id=bob.id)] == [mine.id]
    assert [t.title for t in TaskSelector.get_tasks_list(alice.id, status=Task.Status.DONE)] == ["Mine, loose"]


@pytest.mark.django_db
def test_tasks_for_projects_ignore_creator(alice, bob, project):
    TaskService.create_task(creator_id=alice.id, title="A", project_id=project.id)
    TaskService.create_task(creator_id=bob.id, title="B", project_id=project.id)
    TaskService.create_task(creator_id=bob.id, title="Elsewhere")

    assert {t.title for t in TaskSelector.get_tasks_for_projects([project.id])} == {"A", "B"}
