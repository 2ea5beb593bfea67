import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from tracker.models import Project, Tag, Task

User = get_user_model()


@pytest.fixture
def alice(db):
    return User.objects.create_user(username="alice", password="pass", name="Alice", email="alice@example.com")


@pytest.fixture
def bob(db):
    return User.objects.create_user(username="bob", password="pass", name="Bob", email="bob@example.com")


@pytest.fixture
def carol(db):
    return User.objects.create_user(username="carol", password="pass", name="Carol")


@pytest.fixture
def project(db, alice, bob):
    # alice owns it, bob is a member
    p = Project.objects.create(name="Launch", description="Go live", creator=alice)
    p.members.add(alice, bob)
    return p


@pytest.fixture
def tags(db):
    return {
        name: Tag.objects.create(name=name)
        for name in ("backend", "frontend", "infra")
    }


@pytest.fixture
def task(db, alice, project, tags):
    t = Task.objects.create(title="Write docs", creator=alice, project=project)
    t.tags.add(tags["backend"], tags["frontend"])
    return t


@pytest.fixture
def client_for():
    def _make(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _make
