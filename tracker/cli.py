"""Console entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from tracker.config import TrackerSettings, get_settings
from tracker.config.settings import LOG_LEVELS
from tracker.orchestrator import create_tracker
from tracker.services.storage import StorageError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tracker",
        description="Personal task and expense tracker.",
    )
    p.add_argument(
        "--data-dir",
        help="Directory holding tasks.txt and expenses.txt (default: TRACKER_DATA_DIR or ./data)",
    )
    p.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS),
        help="Audit log level (default: TRACKER_LOG_LEVEL or WARNING)",
    )
    return p


def _settings_from_args(ns: argparse.Namespace) -> TrackerSettings:
    settings = get_settings()
    overrides = {}
    if ns.data_dir:
        overrides["data_dir"] = Path(ns.data_dir).expanduser()
    if ns.log_level:
        overrides["log_level"] = ns.log_level
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: Optional[list[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    settings = _settings_from_args(ns)
    try:
        tracker = create_tracker(settings)
    except StorageError as e:
        print(f"Could not load saved data: {e}", file=sys.stderr)
        return 1
    tracker.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
