"""Pytest bootstrap for project imports."""

from itertools import count
from pathlib import Path
import os
import sys

import pytest

# Ensure project root is on sys.path so `import app` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

# Keep tests off any developer database
os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base  # noqa: E402
from app.schemas.skill import Skill  # noqa: E402


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_skill():
    """Factory for engine-ready skill records with sensible defaults."""
    ids = count(1)

    def _make(**overrides) -> Skill:
        data = {
            "id": f"s{next(ids)}",
            "user_id": "u1",
            "title": "Python programming",
            "description": "Writing clean Python scripts",
            "category": "programming",
            "subcategory": None,
            "proficiency_level": "intermediate",
            "skill_type": "seeking",
        }
        data.update(overrides)
        return Skill(**data)

    return _make
