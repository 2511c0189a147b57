"""
Display preference endpoints.
"""

from typing import Dict, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ValidationError

from fincalc.preferences import A11ySettings, PreferencesStore, ThemeSetting

router = APIRouter()


def get_preferences(request: Request) -> PreferencesStore:
    """The preferences store owned by the running application."""
    return request.app.state.preferences


class PreferencesResponse(BaseModel):
    theme_setting: ThemeSetting
    theme: Literal["light", "dark"]
    a11y: A11ySettings
    reduce_motion: bool
    html_attributes: Dict[str, str]


class PreferencesUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    theme_setting: Optional[ThemeSetting] = None
    text_size: Optional[Literal["normal", "large"]] = None
    high_contrast: Optional[bool] = None
    reduce_motion: Optional[bool] = None


class SystemSettings(BaseModel):
    """OS-level media query values reported by the client."""

    prefers_dark: Optional[bool] = None
    prefers_reduced_motion: Optional[bool] = None


def _snapshot(store: PreferencesStore) -> PreferencesResponse:
    return PreferencesResponse(
        theme_setting=store.theme_setting,
        theme=store.theme,
        a11y=store.a11y,
        reduce_motion=store.reduce_motion,
        html_attributes=store.html_attributes(),
    )


@router.get("", response_model=PreferencesResponse)
async def read_preferences(store: PreferencesStore = Depends(get_preferences)):
    """Current preferences, resolved against the OS settings."""
    return _snapshot(store)


@router.put("", response_model=PreferencesResponse)
async def update_preferences(
    update: PreferencesUpdate, store: PreferencesStore = Depends(get_preferences)
):
    """Change the theme setting and/or accessibility settings."""
    if update.theme_setting is not None:
        store.set_theme_setting(update.theme_setting)

    a11y_updates = update.model_dump(
        exclude_none=True, include={"text_size", "high_contrast", "reduce_motion"}
    )
    if a11y_updates:
        try:
            store.update_a11y(**a11y_updates)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

    return _snapshot(store)


@router.post("/toggle-theme", response_model=PreferencesResponse)
async def toggle_theme(store: PreferencesStore = Depends(get_preferences)):
    """Switch between the light and dark theme."""
    store.toggle_theme()
    return _snapshot(store)


@router.post("/system", response_model=PreferencesResponse)
async def report_system_settings(
    settings: SystemSettings, store: PreferencesStore = Depends(get_preferences)
):
    """Record a change of the OS colour scheme or reduced-motion setting."""
    if settings.prefers_dark is not None:
        store.color_scheme.set_matches(settings.prefers_dark)
    if settings.prefers_reduced_motion is not None:
        store.reduced_motion.set_matches(settings.prefers_reduced_motion)
    return _snapshot(store)
