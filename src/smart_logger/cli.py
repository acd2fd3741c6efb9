from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from smart_logger.core.logger import SmartLogger
from smart_logger.core.models import Severity
from smart_logger.core.settings import DebugBuildMode, StaticBuildMode, load_settings
from smart_logger.core.sinks import ConsoleSink

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.getenv("SMART_LOGGER_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be an integer") from e
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _emit_samples(log: SmartLogger) -> None:
    log.log("Hello World!")
    log.log("Something worth noticing", Severity.IMPORTANT)
    log.log_warning("Hello World!")
    log.log_error("Hello World!")
    log.log_format("Player {0} scored {1} points", "John", 100)
    try:
        _ = 1 / 0
    except ZeroDivisionError as e:
        log.log_exception(e, "dividing the score")


def _run_demo(args: argparse.Namespace) -> None:
    settings = load_settings(args.config)
    if args.no_color:
        settings = settings.model_copy(update={"enable_color_coding": False})
    build_mode = StaticBuildMode(False) if args.release else DebugBuildMode()

    log = SmartLogger(ConsoleSink(sys.stdout), settings=settings, build_mode=build_mode)
    LOGGER.debug("Demo: development=%s minimum=%s", log.is_logging_enabled, log.current_log_level.name)

    for _ in range(args.repeat):
        _emit_samples(log)

    stats = log.cache_stats()
    print(f"Cache size: {stats.count}/{stats.max_size}")


def _run_config(args: argparse.Namespace) -> None:
    print(load_settings(args.config).model_dump_json(indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="smart-logger", description="Caller-annotated logging facade.")
    sub = p.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Emit sample messages and show cache statistics")
    demo.add_argument("--config", default=None, help="Settings JSON (default: $SMART_LOGGER_CONFIG)")
    demo.add_argument("--repeat", type=_positive_int, default=1, help="Emit the samples N times")
    demo.add_argument("--no-color", action="store_true", help="Disable color markup")
    demo.add_argument(
        "--release",
        action="store_true",
        help="Act as a non-development build (only enable_in_build keeps output on)",
    )
    demo.set_defaults(func=_run_demo)

    cfg = sub.add_parser("config", help="Print the effective settings as JSON")
    cfg.add_argument("--config", default=None, help="Settings JSON (default: $SMART_LOGGER_CONFIG)")
    cfg.set_defaults(func=_run_config)

    args = p.parse_args(argv)
    _configure_logging()

    try:
        args.func(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)


if __name__ == "__main__":
    main()
