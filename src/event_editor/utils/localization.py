"""Localized message lookup for field labels and descriptions."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Built-in English messages, keyed by message id
DEFAULT_MESSAGES: dict[str, str] = {
    "collective.slug.label": "url",
    "event.type.label": "Type",
    "Fields.name": "Name",
    "Fields.amount": "Amount",
    "collective.description.label": "Short description",
    "event.longDescription.label": "Long description",
    "startDateAndTime": "start date and time",
    "event.endsAt.label": "end date and time",
    "event.timezone.label": "Timezone",
    "event.location.label": "location",
    "event.privateInstructions.label": "Private instructions",
    "event.privateInstructions.description": (
        "These instructions will be provided by email to the participants."
    ),
    "event.tickets.title": "Tickets",
    "event.submit.loading": "loading",
    "event.submit.create": "Create Event",
    "event.submit.save": "Save",
}

# Message ids per field identifier and text slot
FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "slug": {"label": "collective.slug.label"},
    "type": {"label": "event.type.label"},
    "name": {"label": "Fields.name"},
    "amount": {"label": "Fields.amount"},
    "description": {"label": "collective.description.label"},
    "longDescription": {"label": "event.longDescription.label"},
    "startsAt": {"label": "startDateAndTime"},
    "endsAt": {"label": "event.endsAt.label"},
    "timezone": {"label": "event.timezone.label"},
    "location": {"label": "event.location.label"},
    "privateInstructions": {
        "label": "event.privateInstructions.label",
        "description": "event.privateInstructions.description",
    },
}


class MessageCatalog:
    """Resolves message ids to display strings."""

    def __init__(
        self,
        messages: Optional[Mapping[str, str]] = None,
        field_messages: Optional[Mapping[str, Mapping[str, str]]] = None,
    ):
        """
        Initialize the catalog.

        Args:
            messages: Translations overriding the built-in English messages
            field_messages: Field identifier to message id map (defaults to FIELD_MESSAGES)
        """
        self.messages: dict[str, str] = {**DEFAULT_MESSAGES, **(messages or {})}
        self.field_messages = field_messages if field_messages is not None else FIELD_MESSAGES

    @classmethod
    def from_yaml(cls, path: Path) -> "MessageCatalog":
        """
        Load translations from a YAML mapping of message id to text.

        Raises:
            ConfigurationError: If the file cannot be read or is not a mapping
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot load message catalog {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Message catalog {path} must be a mapping")

        logger.debug(f"Loaded {len(data)} messages from {path}")
        return cls({str(key): str(value) for key, value in data.items()})

    def resolve(self, message_key: str) -> str:
        """Return the display string for a message id, or the id itself if unknown."""
        try:
            return self.messages[message_key]
        except KeyError:
            logger.warning(f"Missing message: {message_key}")
            return message_key

    def field_text(self, field_name: str, slot: str) -> Optional[str]:
        """
        Resolve the text for one slot ("label", "description") of a field.

        Returns:
            Display string, or None if the field has no message for that slot
        """
        message_key = self.field_messages.get(field_name, {}).get(slot)
        if message_key is None:
            return None
        return self.resolve(message_key)
