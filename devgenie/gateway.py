"""Persistence gateway: every read and write against the store, scoped by owner."""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from .models import Project, ProjectDetail, UserPreference

logger = structlog.get_logger()

DetailGenerator = Callable[[], Awaitable[dict[str, Any] | None]]


class PersistenceGateway:
    """Wraps one session. Writes commit immediately; failures roll back and propagate."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _commit(self, operation: str, **context: Any) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.error("persistence_failed", operation=operation, exc_info=True, **context)
            raise

    # === Projects ===

    async def store_projects(
        self, records: Iterable[dict[str, Any]], owner_id: str
    ) -> list[Project]:
        """Insert all records for ``owner_id`` in one transaction and return the stored rows."""
        projects = [Project(owner_id=owner_id, **record) for record in records]
        self.session.add_all(projects)
        await self._commit("store_projects", owner_id=owner_id, count=len(projects))

        for project in projects:
            await self.session.refresh(project)

        logger.info(
            "projects_stored",
            owner_id=owner_id,
            count=len(projects),
            sources=sorted({p.source_provider for p in projects}),
        )
        return projects

    async def list_projects(
        self,
        owner_id: str,
        category: str | None = None,
        search: str | None = None,
    ) -> list[Project]:
        """Owner's projects, newest first, optionally filtered."""
        query = select(Project).where(Project.owner_id == owner_id)
        if category:
            query = query.where(Project.category == category)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(Project.title.ilike(pattern), Project.description.ilike(pattern))
            )
        query = query.order_by(Project.created_at.desc(), Project.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_project(self, owner_id: str, project_id: str) -> Project | None:
        """Project by id, only if it belongs to ``owner_id``."""
        project = await self.session.get(Project, project_id)
        if project is None or project.owner_id != owner_id:
            return None
        return project

    async def delete_project(self, owner_id: str, project_id: str) -> bool:
        """Delete an owned project and its detail row. False if not found."""
        project = await self.get_project(owner_id, project_id)
        if project is None:
            return False

        await self.session.execute(
            delete(ProjectDetail).where(ProjectDetail.project_id == project_id)
        )
        await self.session.delete(project)
        await self._commit("delete_project", owner_id=owner_id, project_id=project_id)
        logger.info("project_deleted", owner_id=owner_id, project_id=project_id)
        return True

    # === Project details ===

    async def find_detail(self, project_id: str) -> ProjectDetail | None:
        result = await self.session.execute(
            select(ProjectDetail).where(ProjectDetail.project_id == project_id)
        )
        return result.scalar_one_or_none()

    async def get_or_create_detail(
        self, project_id: str, generator: DetailGenerator
    ) -> tuple[ProjectDetail | None, bool]:
        """Stored detail for ``project_id``, generating it only when absent.

        Returns (detail, created). A concurrent request that inserted first wins;
        this call then returns that row instead of a second one. When the generator
        produces nothing, nothing is stored and (None, False) is returned.
        """
        existing = await self.find_detail(project_id)
        if existing is not None:
            logger.info("project_detail_cache_hit", project_id=project_id)
            return existing, False

        record = await generator()
        if record is None:
            return None, False

        detail = ProjectDetail(project_id=project_id, **record)
        self.session.add(detail)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            existing = await self.find_detail(project_id)
            if existing is None:
                logger.error("persistence_failed", operation="create_detail", exc_info=True)
                raise
            logger.info("project_detail_insert_lost_race", project_id=project_id)
            return existing, False
        except SQLAlchemyError:
            await self.session.rollback()
            logger.error(
                "persistence_failed",
                operation="create_detail",
                project_id=project_id,
                exc_info=True,
            )
            raise

        await self.session.refresh(detail)
        logger.info(
            "project_detail_created",
            project_id=project_id,
            source=detail.source_provider,
        )
        return detail, True

    # === Preferences ===

    async def get_preferences(self, owner_id: str) -> UserPreference | None:
        return await self.session.get(UserPreference, owner_id)

    async def upsert_preferences(self, owner_id: str, values: dict[str, Any]) -> UserPreference:
        """Create or replace the owner's preferences."""
        preferences = await self.get_preferences(owner_id)
        if preferences is None:
            preferences = UserPreference(owner_id=owner_id, **values)
            self.session.add(preferences)
        else:
            for field, value in values.items():
                setattr(preferences, field, value)

        await self._commit("upsert_preferences", owner_id=owner_id)
        await self.session.refresh(preferences)
        logger.info("preferences_saved", owner_id=owner_id)
        return preferences
