"""User preference schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import CamelModel
from .generation import Difficulty, ProviderName


class PreferencesUpdate(CamelModel):
    """Full preference set written by PUT."""

    preferred_providers: list[ProviderName] = Field(default_factory=list)
    default_difficulty: Difficulty = Difficulty.INTERMEDIATE
    language: str = "en"
    timezone: str = "UTC"
    email_notifications: bool = True
    project_updates: bool = True
    weekly_digest: bool = False
    theme: str = "light"


class PreferencesRead(PreferencesUpdate):
    """Stored preferences; ``updated_at`` is empty until first saved."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    owner_id: str
    updated_at: datetime | None = None
