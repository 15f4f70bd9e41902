"""
Tests for tasks and their tag assignments.
"""

import logging

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app import models

logger = logging.getLogger(__name__)


def _assigned_pairs(db: Session, task_id: int):
    rows = db.query(models.task_tags).filter(models.task_tags.c.task_id == task_id).all()
    return sorted(row.tag_id for row in rows)


def test_create_task(client: TestClient, project, statuses, employee_user):
    response = client.post(
        "/api/tasks",
        json={
            "title": "API development",
            "description": "Develop backend API endpoints",
            "project_id": project.id,
            "status_id": statuses[1].id,
            "creator_id": employee_user.id,
            "priority": "medium",
            "due_date": "2024-09-30",
        },
    )

    assert response.status_code == 201, response.json()
    task = client.get(f"/api/tasks/{response.json()['id']}").json()
    assert task["project_name"] == "Website Redesign"
    assert task["status_name"] == "In Progress"
    assert task["creator_name"] == "user1"
    assert task["tags"] == []


def test_create_task_invalid_reference(client: TestClient, test_db: Session, project, statuses):
    response = client.post(
        "/api/tasks",
        json={
            "title": "Ghost task",
            "project_id": project.id,
            "status_id": statuses[0].id,
            "creator_id": 999,
            "priority": "low",
        },
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid project, status or user reference"}
    assert test_db.query(models.Task).count() == 0


def test_create_task_reports_all_field_errors(client: TestClient):
    response = client.post("/api/tasks", json={"title": "ab", "priority": "urgent"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"title", "priority", "project_id", "status_id", "creator_id"}


def test_list_tasks_has_display_names(client: TestClient, task):
    response = client.get("/api/tasks")

    assert response.status_code == 200
    row = response.json()[0]
    assert row["title"] == "Design homepage"
    assert row["status_name"] == "To Do"
    assert row["creator_name"] == "admin"


def test_update_task_with_empty_body_is_rejected(client: TestClient, test_db: Session, task):
    response = client.put(f"/api/tasks/{task.id}", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "No valid fields provided for update"}
    test_db.refresh(task)
    assert task.title == "Design homepage"
    assert task.priority == "high"


def test_update_task(client: TestClient, task, statuses):
    response = client.put(f"/api/tasks/{task.id}", json={"status_id": statuses[2].id, "priority": "low"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Task updated successfully"
    assert body["task"]["status_id"] == statuses[2].id
    assert body["task"]["priority"] == "low"
    assert body["task"]["title"] == "Design homepage"


def test_update_task_invalid_reference(client: TestClient, test_db: Session, task, statuses):
    response = client.put(f"/api/tasks/{task.id}", json={"status_id": 999})

    assert response.status_code == 400
    test_db.refresh(task)
    assert task.status_id == statuses[0].id


def test_update_missing_task(client: TestClient):
    assert client.put("/api/tasks/321", json={"title": "Something"}).status_code == 404


def test_assign_tags_is_idempotent(client: TestClient, test_db: Session, task, tags):
    tag_ids = [tags[0].id, tags[3].id]

    first = client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": tag_ids})
    assert first.status_code == 201
    assert first.json() == {"count": 2}

    second = client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": tag_ids})
    assert second.status_code == 200
    assert second.json() == {"message": "All tags already assigned to this task"}

    assert _assigned_pairs(test_db, task.id) == sorted(tag_ids)


def test_assign_tags_counts_only_new_pairs(client: TestClient, test_db: Session, task, tags):
    client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": [tags[0].id]})

    response = client.post(
        f"/api/tasks/{task.id}/tags",
        json={"tag_ids": [tags[0].id, tags[1].id, tags[1].id]},
    )

    assert response.status_code == 201
    assert response.json() == {"count": 1}
    assert _assigned_pairs(test_db, task.id) == [tags[0].id, tags[1].id]


def test_assign_unknown_tag(client: TestClient, test_db: Session, task, tags):
    response = client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": [tags[0].id, 999]})

    assert response.status_code == 400
    assert response.json() == {"error": "One or more tags not found"}
    assert _assigned_pairs(test_db, task.id) == []


def test_assign_tags_requires_ids(client: TestClient, task):
    response = client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": []})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "tag_ids"


def test_assign_tags_to_missing_task(client: TestClient, tags):
    assert client.post("/api/tasks/999/tags", json={"tag_ids": [tags[0].id]}).status_code == 404


def test_task_tags_listing_and_detail(client: TestClient, task, tags):
    client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": [tags[3].id, tags[0].id]})

    listed = client.get(f"/api/tasks/{task.id}/tags").json()
    assert [tag["name"] for tag in listed] == ["Frontend", "Feature"]

    detail = client.get(f"/api/tasks/{task.id}").json()
    assert [tag["color"] for tag in detail["tags"]] == ["#3498db", "#9b59b6"]


def test_remove_tag(client: TestClient, test_db: Session, task, tags):
    client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": [tags[0].id, tags[1].id]})

    response = client.delete(f"/api/tasks/{task.id}/tags/{tags[0].id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Tag removed from task successfully"}
    assert _assigned_pairs(test_db, task.id) == [tags[1].id]


def test_remove_tag_not_assigned(client: TestClient, task, tags):
    response = client.delete(f"/api/tasks/{task.id}/tags/{tags[2].id}")

    assert response.status_code == 400
    assert response.json() == {"error": "Tag is not assigned to this task"}


def test_remove_unknown_tag(client: TestClient, task):
    assert client.delete(f"/api/tasks/{task.id}/tags/999").status_code == 404


def test_delete_task_removes_assignments(client: TestClient, test_db: Session, task, tags):
    client.post(f"/api/tasks/{task.id}/tags", json={"tag_ids": [tags[0].id]})
    task_id = task.id

    response = client.delete(f"/api/tasks/{task_id}")

    assert response.status_code == 204
    assert _assigned_pairs(test_db, task_id) == []
    assert test_db.query(models.Tag).count() == len(tags)
    assert client.get(f"/api/tasks/{task_id}").status_code == 404
