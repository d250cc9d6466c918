"""Project service - business logic for project persistence."""

import re
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import ulid
from sqlalchemy import delete, select, update

from pitchlab.db.models import Project
from pitchlab.db.session import Database
from pitchlab.models.project import ProjectDocument

PROJECT_ID_PREFIX = "proj_"
PROJECT_ID_PATTERN = re.compile(r"^proj_[0-9a-hjkmnp-tv-z]{26}$")

# Fields callers may change after creation
UPDATABLE_FIELDS = frozenset({"title", "description", "analysis", "kanban", "workflow"})


class InvalidProjectIdError(ValueError):
    """Raised when a project identifier is not well-formed."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Invalid project ID format: {project_id}")


def new_project_id() -> str:
    return f"{PROJECT_ID_PREFIX}{ulid.new().str.lower()}"


def is_valid_project_id(project_id: Any) -> bool:
    """Check an identifier against the store's key format."""
    return isinstance(project_id, str) and PROJECT_ID_PATTERN.match(project_id) is not None


def _validate_id(project_id: str) -> None:
    if not is_valid_project_id(project_id):
        raise InvalidProjectIdError(project_id)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ProjectService:
    """Service for project CRUD operations."""

    def __init__(self, db: Database, clock: Callable[[], datetime] = _utcnow):
        self.db = db
        self.clock = clock

    async def create(self, title: str, description: str, **artifacts: Any) -> str:
        """Insert a new project and return its identifier."""
        unknown = set(artifacts) - (UPDATABLE_FIELDS - {"title", "description"})
        if unknown:
            raise ValueError(f"Unknown project fields: {', '.join(sorted(unknown))}")

        now = self.clock()
        project = Project(
            id=new_project_id(),
            title=title,
            description=description,
            analysis=artifacts.get("analysis"),
            kanban=artifacts.get("kanban"),
            workflow=artifacts.get("workflow"),
            created_at=now,
            updated_at=now,
        )
        async with self.db.session() as session:
            session.add(project)
            await session.flush()
        return project.id

    async def get(self, project_id: str) -> ProjectDocument | None:
        """Get a project by ID."""
        _validate_id(project_id)
        async with self.db.session() as session:
            result = await session.execute(select(Project).where(Project.id == project_id))
            project = result.scalar_one_or_none()
            return ProjectDocument.model_validate(project) if project else None

    async def list_projects(self) -> list[ProjectDocument]:
        """List all projects, most recently created first."""
        async with self.db.session() as session:
            result = await session.execute(
                select(Project).order_by(Project.created_at.desc(), Project.id.desc())
            )
            return [ProjectDocument.model_validate(p) for p in result.scalars().all()]

    async def update(self, project_id: str, **changes: Any) -> None:
        """Merge the given fields into a project and refresh updated_at.

        Fields not passed are left untouched. Updating a project that does
        not exist is a no-op.
        """
        _validate_id(project_id)
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown project fields: {', '.join(sorted(unknown))}")

        async with self.db.session() as session:
            result = await session.execute(
                select(Project.updated_at).where(Project.id == project_id)
            )
            previous = result.scalar_one_or_none()
            if previous is None:
                return

            now = max(self.clock(), _as_utc(previous))
            await session.execute(
                update(Project)
                .where(Project.id == project_id)
                .values(**changes, updated_at=now)
            )

    async def delete(self, project_id: str) -> None:
        """Delete a project. Deleting a missing project is a no-op."""
        _validate_id(project_id)
        async with self.db.session() as session:
            await session.execute(delete(Project).where(Project.id == project_id))
