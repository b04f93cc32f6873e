import pytest
from pydantic import ValidationError

from event_editor.config import EditorSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in (
        "OC_ENV",
        "EVENT_EDITOR_TICKETS_ENVIRONMENTS",
        "EVENT_EDITOR_IDENTITY_KEY",
        "EVENT_EDITOR_MESSAGES_FILE",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = EditorSettings()
    assert settings.environment == ""
    assert settings.draft_identity_key == "name"
    assert settings.messages_file is None
    assert settings.log_level == "INFO"
    assert settings.tickets_editor_enabled is False


@pytest.mark.parametrize("env", ["e2e", "ci"])
def test_tickets_enabled_in_test_environments(monkeypatch, env) -> None:
    monkeypatch.setenv("OC_ENV", env)
    assert EditorSettings().tickets_editor_enabled is True


def test_tickets_environments_from_env(monkeypatch) -> None:
    monkeypatch.setenv("OC_ENV", "staging")
    monkeypatch.setenv("EVENT_EDITOR_TICKETS_ENVIRONMENTS", '["staging"]')
    assert EditorSettings().tickets_editor_enabled is True


def test_identity_key_from_env(monkeypatch) -> None:
    monkeypatch.setenv("EVENT_EDITOR_IDENTITY_KEY", "id")
    assert EditorSettings().draft_identity_key == "id"


def test_identity_key_is_validated(monkeypatch) -> None:
    monkeypatch.setenv("EVENT_EDITOR_IDENTITY_KEY", "slug")
    with pytest.raises(ValidationError):
        EditorSettings()
