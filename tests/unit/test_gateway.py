import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from devgenie.database import init_models
from devgenie.gateway import PersistenceGateway
from devgenie.generation.fallbacks import fallback_detail, fallback_projects


@pytest.fixture
def gateway(db_session):
    return PersistenceGateway(db_session)


@pytest.mark.asyncio
async def test_store_projects_assigns_ids_and_owner(gateway):
    projects = await gateway.store_projects(fallback_projects("Beginner"), "user-1")

    assert len(projects) == 3
    assert len({p.id for p in projects}) == 3
    assert all(p.owner_id == "user-1" for p in projects)
    assert all(p.created_at is not None for p in projects)


@pytest.mark.asyncio
async def test_list_projects_is_scoped_and_filtered(gateway):
    await gateway.store_projects(fallback_projects("Beginner"), "user-1")
    await gateway.store_projects(fallback_projects("Advanced"), "user-2")

    assert len(await gateway.list_projects("user-1")) == 3
    full_stack = await gateway.list_projects("user-1", category="Full Stack")
    assert [p.title for p in full_stack] == ["Task Management System"]
    weather = await gateway.list_projects("user-1", search="weather")
    assert [p.title for p in weather] == ["Weather Forecast App"]
    assert await gateway.list_projects("nobody") == []


@pytest.mark.asyncio
async def test_get_project_checks_owner(gateway):
    [project, *_] = await gateway.store_projects(fallback_projects("Beginner"), "user-1")

    assert (await gateway.get_project("user-1", project.id)).title == project.title
    assert await gateway.get_project("user-2", project.id) is None
    assert await gateway.get_project("user-1", "missing") is None


@pytest.mark.asyncio
async def test_detail_is_generated_once(gateway):
    [project, *_] = await gateway.store_projects(fallback_projects("Beginner"), "user-1")
    calls = []

    async def generate():
        calls.append(project.id)
        return fallback_detail(project.category)

    first, created_first = await gateway.get_or_create_detail(project.id, generate)
    second, created_second = await gateway.get_or_create_detail(project.id, generate)

    assert calls == [project.id]
    assert created_first is True
    assert created_second is False
    assert first.id == second.id


@pytest.mark.asyncio
async def test_delete_project_removes_detail(gateway):
    [project, *_] = await gateway.store_projects(fallback_projects("Beginner"), "user-1")

    async def generate():
        return fallback_detail()

    await gateway.get_or_create_detail(project.id, generate)

    assert await gateway.delete_project("user-2", project.id) is False
    assert await gateway.delete_project("user-1", project.id) is True
    assert await gateway.find_detail(project.id) is None
    assert await gateway.get_project("user-1", project.id) is None


@pytest.mark.asyncio
async def test_preferences_upsert(gateway):
    assert await gateway.get_preferences("user-1") is None

    created = await gateway.upsert_preferences(
        "user-1", {"default_difficulty": "Advanced", "preferred_providers": ["claude"]}
    )
    assert created.default_difficulty == "Advanced"
    assert created.theme == "light"

    updated = await gateway.upsert_preferences("user-1", {"theme": "dark"})
    assert updated.theme == "dark"
    assert updated.preferred_providers == ["claude"]


@pytest.mark.asyncio
async def test_concurrent_detail_insert_returns_winner(tmp_path):
    """Losing the unique project_id race yields the row that won, not a second one."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'race.db'}")
    await init_models(engine)
    session_maker = async_sessionmaker(engine, expire_on_commit=False)

    try:
        async with session_maker() as setup_session:
            [project, *_] = await PersistenceGateway(setup_session).store_projects(
                fallback_projects("Beginner"), "user-1"
            )

        async with session_maker() as session:
            gateway = PersistenceGateway(session)

            async def generate_while_other_request_wins():
                async with session_maker() as other_session:
                    await PersistenceGateway(other_session).get_or_create_detail(
                        project.id, fallback_detail_async
                    )
                return {**fallback_detail(), "source_provider": "openai"}

            async def fallback_detail_async():
                return fallback_detail()

            detail, created = await gateway.get_or_create_detail(
                project.id, generate_while_other_request_wins
            )

        assert created is False
        assert detail.source_provider == "fallback"
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_empty_generation_stores_nothing(gateway):
    [project, *_] = await gateway.store_projects(fallback_projects("Beginner"), "user-1")

    async def generate_nothing():
        return None

    detail, created = await gateway.get_or_create_detail(project.id, generate_nothing)

    assert detail is None
    assert created is False
    assert await gateway.find_detail(project.id) is None
