"""
Tests for project CRUD and the team reference checks.
"""

import logging

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app import models

logger = logging.getLogger(__name__)


def test_create_project(client: TestClient, team):
    response = client.post(
        "/api/projects",
        json={"name": "Mobile App", "team_id": team.id, "status": "active", "deadline": "2024-11-30"},
    )

    assert response.status_code == 201
    project_id = response.json()["id"]

    project = client.get(f"/api/projects/{project_id}").json()
    assert project["team_name"] == "Developers"
    assert project["deadline"] == "2024-11-30"


def test_create_project_unknown_team(client: TestClient, test_db: Session):
    response = client.post("/api/projects", json={"name": "Orphan", "team_id": 77, "status": "active"})

    assert response.status_code == 400
    assert response.json() == {"error": "Team does not exist"}
    assert test_db.query(models.Project).count() == 0


def test_create_project_rejects_unknown_status_and_bad_date(client: TestClient, team):
    response = client.post(
        "/api/projects",
        json={"name": "Mobile App", "team_id": team.id, "status": "paused", "deadline": "soon"},
    )

    assert response.status_code == 400
    assert {error["field"] for error in response.json()["errors"]} == {"status", "deadline"}


def test_list_projects(client: TestClient, project):
    response = client.get("/api/projects")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Website Redesign"
    assert response.json()[0]["team_name"] == "Developers"


def test_update_project(client: TestClient, project):
    response = client.put(f"/api/projects/{project.id}", json={"status": "archived"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Project updated successfully"
    assert body["project"]["status"] == "archived"
    assert body["project"]["name"] == "Website Redesign"


def test_update_project_unknown_team(client: TestClient, test_db: Session, project, team):
    response = client.put(f"/api/projects/{project.id}", json={"team_id": 555})

    assert response.status_code == 400
    test_db.refresh(project)
    assert project.team_id == team.id


def test_update_missing_project(client: TestClient):
    assert client.put("/api/projects/404", json={"name": "Anything"}).status_code == 404


def test_delete_project_with_tasks_is_rejected(client: TestClient, test_db: Session, task, project):
    response = client.delete(f"/api/projects/{project.id}")

    assert response.status_code == 400
    assert response.json()["taskCount"] == 1
    assert test_db.get(models.Project, project.id) is not None


def test_delete_project(client: TestClient, project):
    assert client.delete(f"/api/projects/{project.id}").status_code == 204
    assert client.get(f"/api/projects/{project.id}").status_code == 404
