"""Field descriptors derived from the event draft."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..models.event import DATE_FIELDS, EventDraft
from ..utils.date_utils import DateConverter, default_converter
from ..utils.localization import MessageCatalog


class FieldType(str, Enum):
    """Input type a field renderer should use."""

    TEXT = "text"
    TEXTAREA = "textarea"
    DATETIME_LOCAL = "datetime-local"
    LOCATION = "location"
    TIMEZONE_PICKER = "timezone-picker"


@dataclass(frozen=True)
class FieldDescriptor:
    """Display-ready description of one editable draft property."""

    name: str
    type: FieldType = FieldType.TEXT
    label: Optional[str] = None
    description: Optional[str] = None
    default_value: Any = ""
    placeholder: Optional[str] = None
    max_length: Optional[int] = None
    validate: Optional[Callable[[Any], bool]] = None


# Editable fields, in display order
FIELD_SPECS: tuple[dict[str, Any], ...] = (
    {"name": "name", "max_length": 255, "placeholder": ""},
    {"name": "description", "type": FieldType.TEXT, "max_length": 255, "placeholder": ""},
    {"name": "startsAt", "type": FieldType.DATETIME_LOCAL},
    {"name": "endsAt", "type": FieldType.DATETIME_LOCAL},
    {"name": "timezone", "type": FieldType.TIMEZONE_PICKER},
    {"name": "location", "type": FieldType.LOCATION, "placeholder": ""},
    {"name": "privateInstructions", "type": FieldType.TEXTAREA, "max_length": 10000},
)

FIELD_ORDER = tuple(spec["name"] for spec in FIELD_SPECS)


def field_default(
    draft: EventDraft,
    name: str,
    converter: DateConverter = default_converter,
) -> Any:
    """
    Compute the value an input should start with.

    Dates are rendered as wall-clock time in the draft's timezone; other
    fields use the draft value, falling back to an empty string.
    """
    if name in DATE_FIELDS:
        return converter.to_wall_clock(draft.get(name), draft.timezone)
    return draft.get(name) or ""


def build_fields(
    draft: EventDraft,
    catalog: Optional[MessageCatalog] = None,
    converter: Optional[DateConverter] = None,
) -> list[FieldDescriptor]:
    """
    Derive the ordered field descriptors for a draft.

    Args:
        draft: Current event draft
        catalog: Localization capability for labels and descriptions
        converter: Date conversion capability

    Returns:
        One FieldDescriptor per editable field, in FIELD_ORDER
    """
    catalog = catalog or MessageCatalog()
    converter = converter or default_converter

    fields = []
    for spec in FIELD_SPECS:
        name = spec["name"]
        fields.append(
            FieldDescriptor(
                **spec,
                label=catalog.field_text(name, "label"),
                description=catalog.field_text(name, "description"),
                default_value=field_default(draft, name, converter),
            )
        )
    return fields
