"""
Tests for teams: creation, name uniqueness, membership listing and delete protection.
"""

import logging

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app import models

logger = logging.getLogger(__name__)


def test_create_team_then_duplicate_name(client: TestClient, test_db: Session):
    first = client.post("/api/teams", json={"name": "QA", "description": "x"})

    assert first.status_code == 201, first.json()
    body = first.json()
    assert body["message"] == "Team created successfully"
    assert body["team"]["name"] == "QA"
    team_id = body["team"]["id"]

    second = client.post("/api/teams", json={"name": "QA", "description": "x"})
    assert second.status_code == 409
    assert second.json() == {"error": "Team name already exists", "existingTeamId": team_id}
    assert test_db.query(models.Team).filter(models.Team.name == "QA").count() == 1


def test_create_team_name_is_trimmed_and_validated(client: TestClient):
    response = client.post("/api/teams", json={"name": "  a  "})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "name"


def test_create_team_creator_defaults_to_caller(client: TestClient, auth_headers, manager_user):
    response = client.post("/api/teams", json={"name": "Platform"}, headers=auth_headers)

    assert response.status_code == 201
    team = response.json()["team"]
    assert team["created_by"] == manager_user.id
    assert team["creator_name"] == "admin"


def test_create_team_without_caller_has_no_creator(client: TestClient):
    response = client.post("/api/teams", json={"name": "Platform"})

    assert response.status_code == 201
    assert response.json()["team"]["created_by"] is None


def test_create_team_unknown_creator(client: TestClient):
    response = client.post("/api/teams", json={"name": "Platform", "created_by": 999})

    assert response.status_code == 400
    assert response.json() == {"error": "User with this ID not found"}


def test_list_and_get_teams(client: TestClient, team):
    listed = client.get("/api/teams").json()
    assert [row["name"] for row in listed] == ["Developers"]
    assert listed[0]["creator_name"] == "admin"

    response = client.get(f"/api/teams/{team.id}")
    assert response.status_code == 200
    assert response.json()["description"] == "Main development team"

    assert client.get("/api/teams/999").status_code == 404


def test_team_members(client: TestClient, team, manager_user, employee_user):
    response = client.get(f"/api/teams/{team.id}/members")

    assert response.status_code == 200
    assert [member["id"] for member in response.json()] == [manager_user.id, employee_user.id]


def test_update_team(client: TestClient, team):
    response = client.put(f"/api/teams/{team.id}", json={"description": "Core team"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Team updated successfully"
    assert body["team"]["name"] == "Developers"
    assert body["team"]["description"] == "Core team"


def test_update_team_to_taken_name(client: TestClient, test_db: Session, team):
    other = models.Team(name="Designers")
    test_db.add(other)
    test_db.commit()

    response = client.put(f"/api/teams/{other.id}", json={"name": "Developers"})

    assert response.status_code == 409
    assert response.json()["existingTeamId"] == team.id


def test_update_team_without_fields(client: TestClient, test_db: Session, team):
    response = client.put(f"/api/teams/{team.id}", json={"description": None})

    assert response.status_code == 400
    test_db.refresh(team)
    assert team.description == "Main development team"


def test_delete_team_with_projects_is_rejected(client: TestClient, test_db: Session, team, project):
    response = client.delete(f"/api/teams/{team.id}")

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete team with associated projects", "projectCount": 1}
    assert test_db.get(models.Team, team.id) is not None


def test_delete_team_removes_memberships(client: TestClient, test_db: Session, team):
    response = client.delete(f"/api/teams/{team.id}")

    assert response.status_code == 204
    assert test_db.query(models.team_members).count() == 0
    assert client.get(f"/api/teams/{team.id}").status_code == 404


def test_team_name_longer_than_column_is_rejected(client: TestClient, test_db: Session):
    response = client.post("/api/teams", json={"name": "T" * 51})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "name"
    assert test_db.query(models.Team).count() == 0
