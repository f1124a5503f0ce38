"""
Yardmaster command line entry point.

Builds a train from a layout snapshot exported by the record store and
prints the resulting car assignments as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from version import get_version_string
from yardmaster.core.exceptions import TrainBuildError
from yardmaster.core.models import LayoutSnapshot
from yardmaster.core.services import ServiceFactory
from yardmaster.managers.config_manager import ConfigData, ConfigManager, ConfigurationError
from yardmaster.utils.helpers import format_build_summary

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup application logging with console and optional file output."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path)))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_snapshot(path: str) -> LayoutSnapshot:
    """
    Read a layout snapshot document.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the document is not valid JSON, lacks required fields
            or has records of the wrong shape
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    try:
        return LayoutSnapshot.from_dict(data)
    except KeyError as e:
        raise ValueError(f"Snapshot is missing required data: {e}")
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Snapshot is malformed: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a train for a switchlist from a layout snapshot",
    )
    parser.add_argument('snapshot', type=str,
                        help='JSON snapshot with route, industries, locations and rollingStock')
    parser.add_argument('--config', '-c', type=str,
                        help='Configuration file path')
    parser.add_argument('--seed', '-s', type=int,
                        help='Random seed for destination assignment')
    parser.add_argument('--summary', action='store_true',
                        help='Print a crew summary instead of JSON')
    parser.add_argument('--version', action='version', version=get_version_string())
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config).load_config() if args.config else ConfigData()
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.logging.level, config.logging.log_file)

    try:
        snapshot = load_snapshot(args.snapshot)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read snapshot {args.snapshot}: {e}")
        return 2

    builder = ServiceFactory(config).create_train_builder(args.seed)
    try:
        result = builder.build_train(
            snapshot.route,
            snapshot.industries,
            snapshot.locations,
            snapshot.rolling_stock,
            snapshot.switchlist,
        )
    except TrainBuildError as e:
        logger.error(f"Train build failed: {e}")
        return 1

    for warning in result.warnings:
        logger.warning(warning)

    if args.summary:
        print("\n".join(format_build_summary(result)))
    else:
        output = result.to_dict()
        if result.switchlist is not None:
            output["switchlist"] = result.switchlist.to_dict()
        print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
