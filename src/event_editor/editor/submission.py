"""Hands the finished draft to the caller's submit callback."""

import logging
from typing import Any, Callable

from .store import DraftStore

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[dict[str, Any]], Any]


class SubmissionCoordinator:
    """Packages the draft and its tiers for submission."""

    def __init__(self, store: DraftStore, on_submit: SubmitCallback):
        """
        Initialize submission coordinator.

        Args:
            store: Draft store to read the snapshot from
            on_submit: Caller-owned callback receiving the payload
        """
        self.store = store
        self.on_submit = on_submit

    def build_payload(self) -> dict[str, Any]:
        """
        Build the submission payload from the current snapshot.

        Returns:
            Draft fields keyed by wire name, instants as ISO-8601 UTC strings,
            with ``tiers`` taken from the store
        """
        state = self.store.state
        payload = state.draft.to_record(json_safe=True)
        payload["tiers"] = list(state.tiers)
        return payload

    def submit(self) -> Any:
        """
        Invoke the submit callback with the current payload.

        The callback result is neither awaited nor inspected; it is returned
        to the caller as-is. The submit flag is not re-checked here.
        """
        payload = self.build_payload()
        logger.info(f"Submitting event '{payload.get('name')}'")
        return self.on_submit(payload)
