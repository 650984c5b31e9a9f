"""User preferences router."""

from fastapi import APIRouter, Depends

from ..dependencies import get_current_owner_id, get_gateway
from ..gateway import PersistenceGateway
from ..schemas import PreferencesRead, PreferencesUpdate

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=PreferencesRead)
async def get_preferences(
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> PreferencesRead:
    """Caller's preferences; defaults when nothing has been saved yet."""
    preferences = await gateway.get_preferences(owner_id)
    if preferences is None:
        return PreferencesRead(owner_id=owner_id)
    return PreferencesRead.model_validate(preferences)


@router.put("", response_model=PreferencesRead)
async def update_preferences(
    preferences_in: PreferencesUpdate,
    owner_id: str = Depends(get_current_owner_id),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> PreferencesRead:
    """Create or replace the caller's preferences."""
    preferences = await gateway.upsert_preferences(
        owner_id, preferences_in.model_dump(mode="json")
    )
    return PreferencesRead.model_validate(preferences)
