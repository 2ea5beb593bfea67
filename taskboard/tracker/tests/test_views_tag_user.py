import pytest

from tracker.models import Task


@pytest.mark.django_db
def test_tag_create_and_list(client_for, alice):
    client = client_for(alice)

    first = client.post("/api/tags/", {"name": "x"}, format="json")
    second = client.post("/api/tags/", {"name": "x"}, format="json")
    assert first.status_code == 201
    assert first.json()["id"] == second.json()["id"]

    client.post("/api/tags/", {"name": "a"}, format="json")
    assert [t["name"] for t in client.get("/api/tags/").json()] == ["a", "x"]


@pytest.mark.django_db
def test_tag_name_length(client_for, alice):
    client = client_for(alice)
    assert client.post("/api/tags/", {"name": ""}, format="json").status_code == 400
    assert client.post("/api/tags/", {"name": "y" * 51}, format="json").status_code == 400


@pytest.mark.django_db
def test_tag_delete(client_for, bob, tags):
    resp = client_for(bob).delete(f"/api/tags/{tags['infra'].id}/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Tag deleted successfully"}

    assert client_for(bob).delete(f"/api/tags/{tags['infra'].id}/").status_code == 403


@pytest.mark.django_db
def test_user_list(client_for, alice, bob, carol):
    users = client_for(alice).get("/api/users/").json()

    assert [u["name"] for u in users] == ["Alice", "Bob", "Carol"]
    assert set(users[0]) == {"id", "name", "email"}


@pytest.mark.django_db
def test_profile_read_and_update(client_for, alice):
    client = client_for(alice)

    assert client.get("/api/users/me/").json() == {"id": alice.id, "name": "Alice", "email": "alice@example.com"}

    resp = client.patch("/api/users/me/", {"name": "Alice L."}, format="json")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Alice L."

    # nothing sent, nothing changes
    resp = client.patch("/api/users/me/", {}, format="json")
    assert resp.json()["name"] == "Alice L."


@pytest.mark.django_db
def test_assigned_tasks(client_for, alice, bob, task):
    Task.objects.create(title="Not for bob", creator=alice)
    task.assignee = bob
    task.save()

    titles = [t["title"] for t in client_for(bob).get("/api/users/me/assigned-tasks/").json()]
    assert titles == ["Write docs"]
