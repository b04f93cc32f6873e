"""Draft store holding the event being edited."""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from ..models.event import EventDraft, Tier

logger = logging.getLogger(__name__)

SourceRecord = Union[EventDraft, dict[str, Any]]


def _source_value(source: Optional[SourceRecord], key: str) -> Any:
    if source is None:
        return None
    return source.get(key)


class EditorState(BaseModel):
    """Snapshot of the editor: the draft, its tiers and the submit flag."""

    draft: EventDraft = Field(default_factory=EventDraft)
    tiers: list[Tier] = Field(default_factory=lambda: [{}])
    submit_disabled: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_source(cls, source: Optional[SourceRecord]) -> "EditorState":
        """
        Build a fresh state from a source event record.

        A record without tiers starts with a single blank tier.
        """
        draft = EventDraft.from_source(source)
        tiers = _source_value(source, "tiers")
        return cls(draft=draft, tiers=[{}] if tiers is None else list(tiers))


class DraftStore:
    """Owns the current editor state and swaps it on every mutation."""

    def __init__(
        self,
        source: Optional[SourceRecord] = None,
        identity_key: str = "name",
    ):
        """
        Initialize the store.

        Args:
            source: Initial source event record (None for an empty draft)
            identity_key: Source key compared by receive_source to decide on a reset
        """
        self.identity_key = identity_key
        self._state = EditorState.from_source(source)
        self._has_previous = source is not None
        self._previous_identity = _source_value(source, identity_key)

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def draft(self) -> EventDraft:
        return self._state.draft

    @property
    def tiers(self) -> list[Tier]:
        return self._state.tiers

    @property
    def submit_disabled(self) -> bool:
        return self._state.submit_disabled

    def replace(self, source: Optional[SourceRecord]) -> EditorState:
        """Reset the whole state from a source event record."""
        self._state = EditorState.from_source(source)
        logger.info(f"Draft reset from source event '{self._state.draft.name}'")
        return self._state

    def merge(self, partial: dict[str, Any]) -> EditorState:
        """
        Shallow-merge top-level draft values.

        Args:
            partial: Values keyed by wire names; nested paths already resolved

        Returns:
            The new state
        """
        if partial:
            self._state = self._state.model_copy(update={"draft": self._state.draft.merge(partial)})
        return self._state

    def set_tiers(self, tiers: list[Tier]) -> EditorState:
        self._state = self._state.model_copy(update={"tiers": list(tiers)})
        return self._state

    def set_submit_disabled(self, disabled: bool) -> EditorState:
        self._state = self._state.model_copy(update={"submit_disabled": disabled})
        return self._state

    def receive_source(self, source: Optional[SourceRecord]) -> bool:
        """
        Take in a refreshed source record.

        The draft is replaced only when no record was seen before or the
        record's identity key (``name`` unless configured otherwise) differs
        from the previous record's. With the default key, an upstream change
        to any other field, ``id`` included, leaves the draft untouched.

        Returns:
            True if the draft was replaced
        """
        if source is None:
            self._has_previous = False
            self._previous_identity = None
            return False

        identity = _source_value(source, self.identity_key)
        changed = not self._has_previous or identity != self._previous_identity
        self._has_previous = True
        self._previous_identity = identity

        if changed:
            self.replace(source)
        else:
            logger.debug(
                f"Source event {self.identity_key}={identity!r} unchanged, keeping draft"
            )
        return changed
