"""Event edit form controller."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..config import EditorSettings, settings as default_settings
from ..models.event import EventDraft, Tier
from ..utils.date_utils import DateConverter, default_converter
from ..utils.localization import MessageCatalog
from .actions import Action, Submit
from .changes import ChangeHandler
from .fields import FieldDescriptor, build_fields
from .store import DraftStore, SourceRecord
from .submission import SubmissionCoordinator, SubmitCallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimezonePickerProps:
    """What a timezone picker needs to render and report a selection."""

    selected_timezone: str
    label: str
    on_change: Callable[[Any], dict[str, Any]]


@dataclass(frozen=True)
class TierEditorProps:
    """What a tier editor needs to render and report changes."""

    tiers: list[Tier]
    title: str
    currency: Optional[str]
    on_change: Callable[[list[Tier]], dict[str, Any]]


def _ignore_submit(payload: dict[str, Any]) -> None:
    logger.warning("No submit callback configured, dropping payload")


class EventEditForm:
    """Edits one event: holds the draft, applies edits and submits it."""

    def __init__(
        self,
        event: Optional[SourceRecord] = None,
        on_submit: Optional[SubmitCallback] = None,
        catalog: Optional[MessageCatalog] = None,
        converter: Optional[DateConverter] = None,
        settings: Optional[EditorSettings] = None,
    ):
        """
        Initialize the form.

        Args:
            event: Source event record to edit (None for a new, empty event)
            on_submit: Callback receiving the submission payload
            catalog: Localization capability (defaults to settings.messages_file or English)
            converter: Date conversion capability (defaults to pytz-backed)
            settings: Editor settings (defaults to the environment-loaded settings)
        """
        self.settings = settings or default_settings
        if catalog is None:
            catalog = (
                MessageCatalog.from_yaml(self.settings.messages_file)
                if self.settings.messages_file
                else MessageCatalog()
            )
        self.catalog = catalog
        self.converter = converter or default_converter

        self.store = DraftStore(event, identity_key=self.settings.draft_identity_key)
        self.handler = ChangeHandler(self.store, self.converter)
        self.coordinator = SubmissionCoordinator(self.store, on_submit or _ignore_submit)

    @property
    def draft(self) -> EventDraft:
        return self.store.draft

    @property
    def submit_disabled(self) -> bool:
        return self.store.submit_disabled

    @property
    def is_ready(self) -> bool:
        """A draft without an owning collective cannot be edited yet."""
        return self.draft.parent_collective is not None

    @property
    def is_new(self) -> bool:
        return not self.draft.id

    @property
    def fields(self) -> list[FieldDescriptor]:
        """Field descriptors for the current draft, or none while not ready."""
        if not self.is_ready:
            return []
        return build_fields(self.draft, self.catalog, self.converter)

    def receive_event(self, event: Optional[SourceRecord]) -> bool:
        """Take in a refreshed source record; returns True if the draft was reset."""
        return self.store.receive_source(event)

    def apply_change(self, field_path: str, value: Any) -> dict[str, Any]:
        return self.handler.apply_change(field_path, value)

    def handle_timezone_change(self, option: Any) -> dict[str, Any]:
        return self.handler.handle_timezone_change(option)

    def dispatch(self, action: Action) -> Any:
        """
        Apply an action; Submit hands the draft to the submit callback.

        Returns:
            The callback result for Submit, the merged partial update otherwise
        """
        if isinstance(action, Submit):
            return self.submit()
        return self.handler.dispatch(action)

    def timezone_picker(self) -> TimezonePickerProps:
        return TimezonePickerProps(
            selected_timezone=self.draft.timezone,
            label=self.catalog.field_text("timezone", "label") or "",
            on_change=self.handle_timezone_change,
        )

    def tier_editor(self) -> Optional[TierEditorProps]:
        """Tier editor contract, or None when the environment disables it."""
        if not self.settings.tickets_editor_enabled:
            return None
        parent = self.draft.parent_collective
        return TierEditorProps(
            tiers=self.store.tiers,
            title=self.catalog.resolve("event.tickets.title"),
            currency=parent.currency if parent else None,
            on_change=self.handler.set_tiers,
        )

    def submit_label(self, loading: bool = False) -> str:
        if loading:
            return self.catalog.resolve("event.submit.loading")
        if self.is_new:
            return self.catalog.resolve("event.submit.create")
        return self.catalog.resolve("event.submit.save")

    def submit(self) -> Any:
        return self.coordinator.submit()
