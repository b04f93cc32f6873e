from datetime import datetime

import pytest
import pytz
from pydantic import ValidationError

from event_editor.models.event import EventDraft, Location, normalize_slug


def test_slug_prefix_is_stripped() -> None:
    draft = EventDraft.from_source({"name": "Party", "slug": "my-collective/my-event"})
    assert draft.slug == "my-event"


@pytest.mark.parametrize(
    "slug, expected",
    [
        ("my-event", "my-event"),
        ("a/b/my-event", "my-event"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_slug(slug, expected) -> None:
    assert normalize_slug(slug) == expected


def test_empty_source_gives_empty_shape() -> None:
    draft = EventDraft.from_source(None)
    assert draft.name == ""
    assert draft.slug == ""
    assert draft.timezone == "UTC"
    assert draft.starts_at is None
    assert draft.parent_collective is None
    assert draft.tiers == []


def test_wire_names_map_to_attributes(source_event) -> None:
    draft = EventDraft.from_source(source_event)
    assert draft.starts_at == pytz.utc.localize(datetime(2024, 1, 1, 17))
    assert draft.parent_collective.currency == "USD"
    assert draft.location == Location(name="Town Hall", address="1 Main St", lat=40.7, long=-74.0)

    record = draft.to_record()
    assert record["startsAt"] == draft.starts_at
    assert record["parentCollective"]["slug"] == "my-collective"
    assert "starts_at" not in record


def test_naive_instants_are_treated_as_utc() -> None:
    draft = EventDraft(name="x", starts_at=datetime(2024, 1, 1, 9, 30))
    assert draft.starts_at.utcoffset().total_seconds() == 0
    assert draft.starts_at.hour == 9


def test_unknown_source_keys_are_kept(source_event) -> None:
    source_event["type"] = "EVENT"
    draft = EventDraft.from_source(source_event)
    assert draft.to_record()["type"] == "EVENT"


def test_draft_is_immutable(source_event) -> None:
    draft = EventDraft.from_source(source_event)
    with pytest.raises(ValidationError):
        draft.name = "Changed"


def test_merge_returns_new_draft(source_event) -> None:
    draft = EventDraft.from_source(source_event)
    merged = draft.merge({"name": "Renamed", "endsAt": "2024-01-01T20:00:00Z"})

    assert merged.name == "Renamed"
    assert merged.ends_at == pytz.utc.localize(datetime(2024, 1, 1, 20))
    assert merged.description == draft.description
    assert draft.name == "Launch Party"


def test_merge_accepts_attribute_names(source_event) -> None:
    draft = EventDraft.from_source(source_event)
    merged = draft.merge({"private_instructions": "Bring ID"})
    assert merged.private_instructions == "Bring ID"


def test_json_record_serializes_instants_as_utc_strings(source_event) -> None:
    record = EventDraft.from_source(source_event).to_record(json_safe=True)
    assert record["startsAt"] == "2024-01-01T17:00:00Z"
