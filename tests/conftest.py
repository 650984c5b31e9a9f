"""Shared fixtures: in-memory database and in-process provider adapters."""

import asyncio
import os
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Settings require a database URL even though tests never use the real engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from devgenie.database import init_models  # noqa: E402
from devgenie.providers.base import ProviderAdapter  # noqa: E402


class FakeAdapter(ProviderAdapter):
    """Adapter that answers from memory instead of calling a provider.

    Only ``_call`` is replaced, so the base class timeout and error handling
    still apply.
    """

    def __init__(
        self,
        name: str,
        reply: str | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
        display_name: str | None = None,
        timeout: float = 1.0,
    ) -> None:
        super().__init__(api_key="test-key", timeout=timeout)
        self.name = name
        self.display_name = display_name or name.title()
        self.reply = reply
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []

    def build_request(self, prompt: str) -> tuple[str, dict[str, str], dict[str, Any]]:
        return "https://provider.invalid/generate", {}, {"prompt": prompt}

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["text"]

    async def _call(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply or ""

    @property
    def calls(self) -> int:
        return len(self.prompts)


@pytest.fixture
def fake_adapter():
    """Factory for in-process adapters."""
    return FakeAdapter


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session
