"""
Tests for the tag and task status catalogues.
"""

import logging

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app import models

logger = logging.getLogger(__name__)


def test_create_tag_normalises_color(client: TestClient):
    response = client.post("/api/tags", json={"name": "Docs", "color": "1abc9c"})

    assert response.status_code == 201
    tag = client.get(f"/api/tags/{response.json()['id']}").json()
    assert tag == {"id": response.json()["id"], "name": "Docs", "color": "#1abc9c"}


def test_create_tag_rejects_bad_color(client: TestClient):
    response = client.post("/api/tags", json={"name": "Docs", "color": "#12345"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "color"


def test_create_duplicate_tag(client: TestClient, test_db: Session, tags):
    response = client.post("/api/tags", json={"name": "Bug", "color": "#000000"})

    assert response.status_code == 409
    assert response.json() == {"error": "Tag name already exists"}
    assert test_db.query(models.Tag).filter(models.Tag.name == "Bug").count() == 1


def test_update_tag(client: TestClient, tags):
    response = client.put(f"/api/tags/{tags[2].id}", json={"color": "#c0392b"})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Tag updated successfully",
        "tag": {"id": tags[2].id, "name": "Bug", "color": "#c0392b"},
    }


def test_update_tag_to_taken_name(client: TestClient, tags):
    assert client.put(f"/api/tags/{tags[2].id}", json={"name": "Feature"}).status_code == 409


def test_update_tag_without_fields(client: TestClient, tags):
    assert client.put(f"/api/tags/{tags[0].id}", json={}).status_code == 400


def test_delete_tag_removes_assignments(client: TestClient, test_db: Session, task, tags):
    client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": [tags[0].id, tags[1].id]})

    response = client.delete(f"/api/tags/{tags[0].id}")

    assert response.status_code == 204
    remaining = [tag["id"] for tag in client.get(f"/api/tasks/{task.id}/tags").json()]
    assert remaining == [tags[1].id]
    assert client.get(f"/api/tags/{tags[0].id}").status_code == 404


def test_task_status_lifecycle(client: TestClient):
    created = client.post("/api/task-statuses", json={"name": "Review"})
    assert created.status_code == 201
    status_id = created.json()["id"]

    assert client.post("/api/task-statuses", json={"name": "Review"}).status_code == 409

    renamed = client.put(f"/api/task-statuses/{status_id}", json={"name": "In Review"})
    assert renamed.status_code == 200
    assert renamed.json() == {"id": status_id, "name": "In Review"}

    assert [row["name"] for row in client.get("/api/task-statuses").json()] == ["In Review"]

    assert client.delete(f"/api/task-statuses/{status_id}").status_code == 204
    assert client.put(f"/api/task-statuses/{status_id}", json={"name": "Gone"}).status_code == 404


def test_rename_status_without_name(client: TestClient, statuses):
    assert client.put(f"/api/task-statuses/{statuses[0].id}", json={}).status_code == 400


def test_delete_status_in_use(client: TestClient, test_db: Session, task, statuses):
    response = client.delete(f"/api/task-statuses/{statuses[0].id}")

    assert response.status_code == 400
    assert response.json()["taskCount"] == 1
    assert test_db.get(models.TaskStatus, statuses[0].id) is not None
