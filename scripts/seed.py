# scripts/seed.py

import os
import sys
import argparse
from datetime import datetime, timedelta

from dotenv import load_dotenv
from sqlmodel import Session, select

# Ensure root path for relative imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# ✅ Load environment variables
load_dotenv()

from core.database import engine, create_db_and_tables
from core.date_utils import format_date
from models.models import Project
from schemas.project_schema import ProjectCreate
from services import project_service


def _seed_project(session: Session, payload: dict) -> None:
    existing = session.exec(select(Project).where(Project.name == payload["name"])).first()
    if existing:
        print(f"⏭️  Project '{existing.name}' already exists")
        return

    project = project_service.create_project(session, ProjectCreate.model_validate(payload))
    print(
        f"✅ Created '{project.name}' starting {format_date(project.start_date)} "
        f"with {len(project.tasks)} task(s)"
    )
    for task in project.tasks:
        status = "done" if task.is_completed else "due " + format_date(task.due_date)
        print(f"   • {task.title} ({status})")


def seed_dev_data():
    """Seed development database with a couple of demo projects."""
    print("🌱 Seeding development data...")
    today = datetime.utcnow().replace(hour=0, minute=0, second=0, microsecond=0)

    with Session(engine) as session:
        _seed_project(session, {
            "name": "Website Redesign",
            "description": "Refresh the marketing site",
            "startDate": today - timedelta(days=14),
            "tasks": [
                {"title": "Wireframes", "description": "Low-fi page layouts",
                 "dueDate": today - timedelta(days=7), "isCompleted": True},
                {"title": "Visual design", "description": "Mockups for home and pricing",
                 "dueDate": today - timedelta(days=1)},
                {"title": "Build pages", "description": "Implement approved mockups",
                 "dueDate": today + timedelta(days=10)},
            ],
        })
        _seed_project(session, {
            "name": "Mobile App",
            "description": "First release of the companion app",
            "startDate": today,
            "tasks": [
                {"title": "Backlog grooming", "description": "Agree on v1 scope",
                 "dueDate": today + timedelta(days=3)},
            ],
        })

    print("🌱 Development data seeding complete.")


def seed_staging_data():
    """Seed staging database with minimal safe data."""
    print("🌱 Seeding staging data...")

    with Session(engine) as session:
        _seed_project(session, {
            "name": "Staging Smoke Test",
            "description": "Placeholder project for smoke tests",
            "startDate": datetime.utcnow(),
        })

    print("🌱 Staging data seeding complete.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the TaskBoard database.")
    parser.add_argument(
        "--env",
        choices=["dev", "staging"],
        default="dev",
        help="Select environment to seed (dev or staging)",
    )
    args = parser.parse_args()

    create_db_and_tables()
    if args.env == "dev":
        seed_dev_data()
    elif args.env == "staging":
        seed_staging_data()
