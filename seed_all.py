"""
Master Database Seeding Script
Creates database tables and populates with demo data
"""

import sys
from datetime import date, time

from dotenv import load_dotenv

# Load environment variables before the app settings are read
load_dotenv()

from sqlalchemy.orm import Session  # noqa: E402

from app.database import SessionLocal  # noqa: E402
from app.models import Event, Project, Tag, Task, TaskStatus, Team, User, task_tags  # noqa: E402
from app.utils.security import hash_password  # noqa: E402
from create_tables import create_tables  # noqa: E402

# Import demo data
from demo_users import DEMO_USERS, DEMO_EVENTS  # noqa: E402
from demo_teams import DEMO_TEAMS  # noqa: E402
from demo_projects import DEMO_PROJECTS  # noqa: E402
from demo_tasks import DEMO_TASK_STATUSES, DEMO_TAGS, DEMO_TASKS  # noqa: E402


def _banner(title: str):
    print(f"\n{'='*60}")
    print(f"🚀 {title}")
    print(f"{'='*60}")


def seed_task_statuses(session: Session, id_map: dict):
    _banner("Creating Task Statuses")
    for position, name in enumerate(DEMO_TASK_STATUSES, start=1):
        existing = session.query(TaskStatus).filter(TaskStatus.name == name).first()
        if existing:
            print(f"[SKIP] Status '{name}' already exists, skipping...")
            id_map[position] = existing.id
            continue
        status = TaskStatus(name=name)
        session.add(status)
        session.flush()
        id_map[position] = status.id
        print(f"[SUCCESS] Created status: {name}")


def seed_demo_users(session: Session, id_map: dict):
    _banner("Creating Demo Users")
    for position, user_data in enumerate(DEMO_USERS, start=1):
        existing = session.query(User).filter(User.email == user_data["email"]).first()
        if existing:
            print(f"[SKIP] User {user_data['email']} already exists, skipping...")
            id_map[position] = existing.id
            continue
        user = User(
            username=user_data["username"],
            email=user_data["email"],
            password_hash=hash_password(user_data["password"]),
            role=user_data["role"],
        )
        session.add(user)
        session.flush()
        id_map[position] = user.id
        print(f"[SUCCESS] Created user: {user.username} ({user.role})")


def seed_demo_teams(session: Session, user_ids: dict, id_map: dict):
    _banner("Creating Demo Teams")
    for position, team_data in enumerate(DEMO_TEAMS, start=1):
        existing = session.query(Team).filter(Team.name == team_data["name"]).first()
        if existing:
            print(f"[SKIP] Team {team_data['name']} already exists, skipping...")
            id_map[position] = existing.id
            continue
        team = Team(
            name=team_data["name"],
            description=team_data["description"],
            created_by=user_ids.get(team_data["created_by"]),
        )
        team.members = [session.get(User, user_ids[member]) for member in team_data["member_ids"]]
        session.add(team)
        session.flush()
        id_map[position] = team.id
        print(f"[SUCCESS] Created team: {team.name} (Members: {len(team.members)})")


def seed_demo_tags(session: Session, id_map: dict):
    _banner("Creating Demo Tags")
    for position, tag_data in enumerate(DEMO_TAGS, start=1):
        existing = session.query(Tag).filter(Tag.name == tag_data["name"]).first()
        if existing:
            print(f"[SKIP] Tag {tag_data['name']} already exists, skipping...")
            id_map[position] = existing.id
            continue
        tag = Tag(**tag_data)
        session.add(tag)
        session.flush()
        id_map[position] = tag.id
        print(f"[SUCCESS] Created tag: {tag.name}")


def seed_demo_projects(session: Session, team_ids: dict, id_map: dict):
    _banner("Creating Demo Projects")
    for position, project_data in enumerate(DEMO_PROJECTS, start=1):
        existing = session.query(Project).filter(Project.name == project_data["name"]).first()
        if existing:
            print(f"[SKIP] Project {project_data['name']} already exists, skipping...")
            id_map[position] = existing.id
            continue
        project = Project(
            name=project_data["name"],
            description=project_data["description"],
            team_id=team_ids[project_data["team_id"]],
            status=project_data["status"],
            deadline=date.fromisoformat(project_data["deadline"]),
        )
        session.add(project)
        session.flush()
        id_map[position] = project.id
        print(f"[SUCCESS] Created project: {project.name} (Status: {project.status})")


def seed_demo_tasks(session: Session, ids: dict):
    _banner("Creating Demo Tasks")
    for task_data in DEMO_TASKS:
        if session.query(Task).filter(Task.title == task_data["title"]).first():
            print(f"[SKIP] Task '{task_data['title']}' already exists, skipping...")
            continue
        task = Task(
            title=task_data["title"],
            description=task_data["description"],
            project_id=ids["projects"][task_data["project_id"]],
            status_id=ids["statuses"][task_data["status_id"]],
            creator_id=ids["users"][task_data["creator_id"]],
            priority=task_data["priority"],
            due_date=date.fromisoformat(task_data["due_date"]),
        )
        session.add(task)
        session.flush()
        session.execute(
            task_tags.insert(),
            [{"task_id": task.id, "tag_id": ids["tags"][tag_id]} for tag_id in task_data["tag_ids"]],
        )
        print(f"[SUCCESS] Created task: {task.title} (Priority: {task.priority}, Tags: {len(task_data['tag_ids'])})")


def seed_demo_events(session: Session, user_ids: dict):
    _banner("Creating Demo Events")
    for event_data in DEMO_EVENTS:
        user_id = user_ids[event_data["user_id"]]
        exists = (
            session.query(Event)
            .filter(Event.user_id == user_id, Event.title == event_data["title"])
            .first()
        )
        if exists:
            print(f"[SKIP] Event '{event_data['title']}' already exists, skipping...")
            continue
        session.add(Event(
            user_id=user_id,
            title=event_data["title"],
            description=event_data["description"],
            event_date=date.fromisoformat(event_data["event_date"]),
            event_time=time.fromisoformat(event_data["event_time"]),
            color=event_data["color"],
        ))
        print(f"[SUCCESS] Created event: {event_data['title']} ({event_data['event_date']})")


def seed_all() -> bool:
    """Seed every demo table in dependency order inside one transaction"""
    session = SessionLocal()
    ids = {"statuses": {}, "users": {}, "teams": {}, "tags": {}, "projects": {}}
    try:
        seed_task_statuses(session, ids["statuses"])
        seed_demo_users(session, ids["users"])
        seed_demo_teams(session, ids["users"], ids["teams"])
        seed_demo_tags(session, ids["tags"])
        seed_demo_projects(session, ids["teams"], ids["projects"])
        seed_demo_tasks(session, ids)
        seed_demo_events(session, ids["users"])
        session.commit()
        return True
    except Exception as e:
        print(f"[ERROR] Error seeding demo data: {e}")
        session.rollback()
        return False
    finally:
        session.close()


def main():
    _banner("Creating Database Tables")
    if not create_tables():
        print("[ERROR] Failed to create database tables")
        return 1

    if not seed_all():
        return 1

    print(f"\n{'='*60}")
    print("[SUCCESS] Demo data seeded successfully!")
    print("   Login: admin@example.com / admin123")
    print(f"{'='*60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
