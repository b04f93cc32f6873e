"""CLI entry point for the event editor."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from .config import settings
from .editor.form import EventEditForm
from .utils.exceptions import ConfigurationError, EventEditorError
from .utils.localization import MessageCatalog
from .utils.logging import setup_logging


def _load_event(path: Path) -> dict[str, Any]:
    """Load an event record from a YAML or JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load event file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Event file {path} must contain a mapping")
    return data


def _parse_edit(raw: str) -> tuple[str, str]:
    """Parse a PATH=VALUE edit argument."""
    path, sep, value = raw.partition("=")
    if not sep or not path.strip():
        raise argparse.ArgumentTypeError(f"Expected PATH=VALUE, got '{raw}'")
    return path.strip(), value


def _print_payload(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Event Editor - Apply edits to an event record and build its submission payload"
    )
    parser.add_argument(
        "event_file",
        type=Path,
        help="Event record to edit (YAML or JSON)",
    )
    parser.add_argument(
        "--set",
        dest="edits",
        action="append",
        type=_parse_edit,
        metavar="PATH=VALUE",
        help="Apply an edit, e.g. timezone=Europe/Paris or location.address='1 Main St' (repeatable)",
    )
    parser.add_argument(
        "--fields",
        action="store_true",
        help="List editable fields with their default values",
    )
    parser.add_argument(
        "--submit",
        action="store_true",
        help="Print the submission payload as JSON",
    )
    parser.add_argument(
        "--messages",
        type=Path,
        default=None,
        help="YAML message catalog for labels (overrides config)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    # Setup logging
    log_level = "DEBUG" if args.verbose else settings.log_level
    logger = setup_logging(level=log_level, log_file=settings.log_file)

    try:
        event = _load_event(args.event_file)
        catalog = MessageCatalog.from_yaml(args.messages) if args.messages else None
        form = EventEditForm(event, on_submit=_print_payload, catalog=catalog)

        if not form.is_ready:
            logger.error("Event has no parentCollective, nothing to edit")
            return 1

        for path, value in args.edits or []:
            form.apply_change(path, value)
            logger.info(f"Set {path}")

        if args.fields:
            for field in form.fields:
                print(f"{field.name} [{field.type.value}] {field.label}: {field.default_value!r}")

        if args.submit:
            if form.submit_disabled:
                logger.error("Event name is empty, not submitting")
                return 1
            form.submit()

        if not args.fields and not args.submit:
            # No action specified
            parser.print_help()
        return 0

    except EventEditorError as e:
        logger.error(f"Event editor error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
