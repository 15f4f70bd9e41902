# create_tables.py
import argparse

from dotenv import load_dotenv

load_dotenv()

import app.models  # noqa: E402,F401  registers every table on Base.metadata
from app.database import Base, engine  # noqa: E402


def create_tables(drop_existing: bool = False):
    """Create all tables, optionally dropping the existing schema first"""
    try:
        if drop_existing:
            # drop_all walks the foreign keys in reverse dependency order
            Base.metadata.drop_all(bind=engine)
            print("[SUCCESS] Existing tables dropped")

        Base.metadata.create_all(bind=engine)
        print("✅ All tables created successfully!")
        print(f"   Tables: {', '.join(sorted(Base.metadata.tables))}")
        return True

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        return False


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the Task Manager database schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables before creating them")
    args = parser.parse_args()
    raise SystemExit(0 if create_tables(drop_existing=args.drop) else 1)
