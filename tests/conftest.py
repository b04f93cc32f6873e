import pytest

from event_editor.config import EditorSettings
from event_editor.editor.form import EventEditForm


@pytest.fixture
def source_event() -> dict:
    return {
        "id": 42,
        "slug": "my-collective/my-event",
        "name": "Launch Party",
        "description": "Celebrating the launch",
        "startsAt": "2024-01-01T17:00:00Z",
        "endsAt": "2024-01-01T19:00:00Z",
        "timezone": "America/New_York",
        "location": {"name": "Town Hall", "address": "1 Main St", "lat": 40.7, "long": -74.0},
        "tiers": [{"name": "General admission", "amount": 1000}],
        "parentCollective": {"id": 7, "slug": "my-collective", "currency": "USD"},
    }


@pytest.fixture
def editor_settings() -> EditorSettings:
    # model_construct skips reading the environment
    return EditorSettings.model_construct()


@pytest.fixture
def submitted() -> list:
    return []


@pytest.fixture
def form(source_event, editor_settings, submitted) -> EventEditForm:
    return EventEditForm(source_event, on_submit=submitted.append, settings=editor_settings)
