from event_editor.editor.fields import FIELD_ORDER, FieldType, build_fields, field_default
from event_editor.models.event import EventDraft
from event_editor.utils.localization import MessageCatalog


def _by_name(fields) -> dict:
    return {field.name: field for field in fields}


def test_fields_come_in_fixed_order(source_event) -> None:
    fields = build_fields(EventDraft.from_source(source_event))
    assert [field.name for field in fields] == list(FIELD_ORDER)
    assert FIELD_ORDER == (
        "name",
        "description",
        "startsAt",
        "endsAt",
        "timezone",
        "location",
        "privateInstructions",
    )


def test_date_defaults_are_wall_clock_in_event_timezone(source_event) -> None:
    fields = _by_name(build_fields(EventDraft.from_source(source_event)))
    assert fields["startsAt"].default_value == "2024-01-01T12:00"
    assert fields["endsAt"].default_value == "2024-01-01T14:00"
    assert fields["startsAt"].type is FieldType.DATETIME_LOCAL


def test_date_defaults_follow_timezone_changes(source_event) -> None:
    draft = EventDraft.from_source(source_event).merge({"timezone": "Europe/Paris"})
    fields = _by_name(build_fields(draft))
    assert fields["startsAt"].default_value == "2024-01-01T18:00"


def test_timezone_uses_picker_type(source_event) -> None:
    fields = _by_name(build_fields(EventDraft.from_source(source_event)))
    assert fields["timezone"].type is FieldType.TIMEZONE_PICKER
    assert fields["timezone"].default_value == "America/New_York"


def test_missing_values_fall_back_to_empty_string() -> None:
    fields = _by_name(build_fields(EventDraft.from_source({"name": "New"})))
    assert fields["description"].default_value == ""
    assert fields["privateInstructions"].default_value == ""
    assert fields["startsAt"].default_value == ""
    assert fields["name"].default_value == "New"


def test_static_metadata(source_event) -> None:
    fields = _by_name(build_fields(EventDraft.from_source(source_event)))
    assert fields["name"].max_length == 255
    assert fields["name"].placeholder == ""
    assert fields["privateInstructions"].type is FieldType.TEXTAREA
    assert fields["privateInstructions"].max_length == 10000
    assert fields["location"].type is FieldType.LOCATION
    assert fields["location"].default_value["address"] == "1 Main St"


def test_labels_come_from_catalog(source_event) -> None:
    catalog = MessageCatalog(
        {
            "Fields.name": "Nom",
            "event.privateInstructions.description": "Envoyé par email aux participants.",
        }
    )
    fields = _by_name(build_fields(EventDraft.from_source(source_event), catalog))

    assert fields["name"].label == "Nom"
    assert fields["privateInstructions"].description == "Envoyé par email aux participants."
    # Untranslated ids fall back to the built-in English text
    assert fields["startsAt"].label == "start date and time"
    assert fields["name"].description is None


def test_field_default_uses_injected_converter(source_event) -> None:
    class FixedConverter:
        def to_instant(self, wall_clock, timezone):
            raise AssertionError("not used")

        def to_wall_clock(self, instant, timezone):
            return f"wall:{timezone}"

    draft = EventDraft.from_source(source_event)
    assert field_default(draft, "endsAt", FixedConverter()) == "wall:America/New_York"
