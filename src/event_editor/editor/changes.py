"""Change handling: turns field edits into draft updates."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..models.event import DATE_FIELDS, READ_ONLY_FIELDS, EventDraft, Tier
from ..utils.date_utils import DateConverter, default_converter
from .actions import (
    Action,
    ChangeDate,
    ChangeTimezone,
    SetField,
    SetTiers,
    Submit,
    action_for_change,
)
from .store import DraftStore, EditorState

logger = logging.getLogger(__name__)


@dataclass
class Change:
    """Result of resolving one action against a draft."""

    partial: dict[str, Any] = field(default_factory=dict)
    submit_disabled: Optional[bool] = None
    tiers: Optional[list[Tier]] = None


def set_path(record: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """
    Return a copy of ``record`` with ``value`` set at a dotted path.

    Missing or non-mapping intermediate values are replaced by new dicts;
    sibling keys along the path are kept.
    """
    head, _, rest = path.partition(".")
    result = dict(record)
    if not rest:
        result[head] = value
        return result

    child = record.get(head)
    if not isinstance(child, dict):
        child = {}
    result[head] = set_path(child, rest, value)
    return result


def is_blank_name(value: Any) -> bool:
    return not str(value if value is not None else "").strip()


def resolve_change(
    draft: EventDraft,
    action: Action,
    converter: DateConverter = default_converter,
) -> Change:
    """
    Compute the update an action makes to a draft.

    Args:
        draft: Current draft
        action: Action to resolve
        converter: Date conversion capability

    Returns:
        Change holding the top-level partial update and any flag or tier changes

    Raises:
        InvalidDateInput: Propagated from the converter
    """
    if isinstance(action, ChangeDate):
        instant = converter.to_instant(action.wall_clock, draft.timezone)
        return Change(partial={action.field: instant})

    if isinstance(action, ChangeTimezone) and action.zone:
        partial: dict[str, Any] = {}
        for name in DATE_FIELDS:
            instant = draft.get(name)
            if instant is None:
                partial[name] = None
                continue
            wall_clock = converter.to_wall_clock(instant, draft.timezone)
            partial[name] = converter.to_instant(wall_clock, action.zone)
        partial["timezone"] = action.zone
        return Change(partial=partial)

    if isinstance(action, ChangeTimezone):
        # An empty zone is stored as-is, without touching the dates
        action = SetField("timezone", action.zone)

    if isinstance(action, SetField):
        head = action.path.split(".", 1)[0]
        if head in READ_ONLY_FIELDS:
            logger.debug(f"Ignoring edit to read-only field {action.path}")
            return Change()
        updated = set_path(draft.to_record(), action.path, action.value)
        change = Change(partial={head: updated[head]})
        if action.path == "name":
            change.submit_disabled = is_blank_name(action.value)
        return change

    if isinstance(action, SetTiers):
        return Change(tiers=list(action.tiers))

    if isinstance(action, Submit):
        return Change()

    raise TypeError(f"Unknown action: {action!r}")


def reduce(
    state: EditorState,
    action: Action,
    converter: DateConverter = default_converter,
) -> EditorState:
    """
    Apply an action to an editor state without mutating it.

    Submit leaves the state unchanged; handing the draft off is the
    submission coordinator's job.
    """
    change = resolve_change(state.draft, action, converter)
    update: dict[str, Any] = {}
    if change.partial:
        update["draft"] = state.draft.merge(change.partial)
    if change.submit_disabled is not None:
        update["submit_disabled"] = change.submit_disabled
    if change.tiers is not None:
        update["tiers"] = change.tiers
    return state.model_copy(update=update) if update else state


class ChangeHandler:
    """Applies field edits to the draft held by a DraftStore."""

    def __init__(
        self,
        store: DraftStore,
        converter: Optional[DateConverter] = None,
    ):
        """
        Initialize change handler.

        Args:
            store: Draft store to merge updates into
            converter: Date conversion capability (defaults to pytz-backed)
        """
        self.store = store
        self.converter = converter or default_converter

    def dispatch(self, action: Action) -> dict[str, Any]:
        """
        Resolve an action against the current draft and merge the result.

        Returns:
            The partial update merged into the draft
        """
        change = resolve_change(self.store.draft, action, self.converter)
        if change.submit_disabled is not None:
            self.store.set_submit_disabled(change.submit_disabled)
        if change.tiers is not None:
            self.store.set_tiers(change.tiers)
        self.store.merge(change.partial)
        return change.partial

    def apply_change(self, field_path: str, value: Any) -> dict[str, Any]:
        """
        Apply a single field edit.

        Args:
            field_path: Dotted path of the edited field, e.g. "location.address"
            value: New value; wall-clock strings for startsAt/endsAt

        Returns:
            The partial update merged into the draft
        """
        logger.debug(f"Applying change to {field_path}")
        return self.dispatch(action_for_change(field_path, value))

    def handle_timezone_change(self, option: Union[str, dict[str, Any], None]) -> dict[str, Any]:
        """Apply a timezone picker selection, given as a zone or a {"value": zone} option."""
        zone = option.get("value") if isinstance(option, dict) else option
        return self.apply_change("timezone", zone)

    def set_tiers(self, tiers: list[Tier]) -> dict[str, Any]:
        return self.dispatch(SetTiers(tiers))
