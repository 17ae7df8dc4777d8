from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import yaml

from . import __version__
from .config import FuzipSettings, find_config
from .core.models import FuzipMissing
from .core.two import fuzzy_zip_two
from .execute import ExecTemplate, MissingPolicy, run_records
from .log import configure_logging
from .paths import prep_paths

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzip",
        description="Pair the files of two directories by fuzzy matching their names",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        metavar="input",
        help="Directories to match files from",
    )
    parser.add_argument("--config", type=Path, help="Path to fuzip.yaml")
    parser.add_argument("--log-level", default=None, help="Python logging level")
    parser.add_argument(
        "-f",
        "--full-only",
        action="store_true",
        help="Only output records where every input has a match",
    )
    parser.add_argument(
        "--missing",
        choices=[policy.value for policy in MissingPolicy],
        default=None,
        help="How --exec treats a placeholder for a side without a match",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each command before running it",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Log the commands --exec would run without running them",
    )
    parser.add_argument(
        "-x",
        "--exec",
        dest="exec_argv",
        nargs=argparse.REMAINDER,
        metavar="CMD",
        help="Run CMD for each record; {1}, {2}... are replaced by the matched values",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_settings(args: argparse.Namespace) -> FuzipSettings:
    settings = FuzipSettings.load(find_config(args.config)).with_env()
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.full_only:
        overrides["full_only"] = True
    if args.missing:
        overrides["missing"] = args.missing
    if args.verbose:
        overrides["verbose"] = True
    if not overrides:
        return settings
    return FuzipSettings.model_validate({**settings.model_dump(), **overrides})


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        parser.exit(1, f"fuzip: error: invalid configuration: {exc}\n")
    configure_logging(settings.log_level)
    logger.debug("settings: %s", settings)

    template: Optional[ExecTemplate] = None
    if args.exec_argv is not None:
        try:
            template = ExecTemplate.parse(args.exec_argv)
        except ValueError as exc:
            parser.error(str(exc))

    if len(args.inputs) != 2:
        parser.exit(1, "fuzip: error: currently only 2 inputs are supported\n")
    try:
        inputs = prep_paths(args.inputs)
    except OSError as exc:
        parser.exit(1, f"fuzip: error: {exc}\n")
    lefts, rights = inputs
    for directory, values in zip(args.inputs, inputs):
        if not values:
            parser.exit(1, f"fuzip: error: no files found in {directory}\n")

    records = iter(fuzzy_zip_two(lefts, rights))
    if settings.full_only:
        records = (record for record in records if record.complete())

    if template is None:
        for record in records:
            print(record)
        return

    try:
        failures = run_records(
            records,
            template,
            missing=settings.missing,
            verbose=settings.verbose,
            dry_run=args.dry_run,
        )
    except (FuzipMissing, OSError) as exc:
        parser.exit(1, f"fuzip: error: {exc}\n")
    if failures:
        raise SystemExit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
