"""
Command templates run once per fuzzy zip record.

Arguments may reference record slots with 1-based placeholders, so
`diff {1} {2}` compares the left and right file of every pair. `{{` and `}}`
stand for literal braces.
"""

from __future__ import annotations

import logging
import re
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .core.models import Fuzip, Fuzippable, NoMatch

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{|\}\}|\{(\d+)\}")


class MissingPolicy(str, Enum):
    """What to do when a placeholder points at an absent slot."""

    SKIP = "skip"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ExecTemplate:
    argv: tuple[str, ...]

    @classmethod
    def parse(cls, argv: Sequence[str]) -> "ExecTemplate":
        if not argv:
            raise ValueError("exec template needs a command")
        for arg in argv:
            for match in PLACEHOLDER_RE.finditer(arg):
                if match.group(1) is not None and int(match.group(1)) == 0:
                    raise ValueError(f"placeholders are 1-based, got {{0}} in {arg!r}")
        return cls(tuple(argv))

    def to_command(
        self,
        record: Fuzip[Fuzippable],
        missing: MissingPolicy = MissingPolicy.ERROR,
    ) -> Optional[List[str]]:
        """
        Render the argv for one record.

        Returns None when `missing` is SKIP and the record lacks a slot the
        template uses. Raises `NoMatch` under ERROR, and `OutOfBounds` for a
        placeholder past the record width under every policy.
        """
        command: List[str] = []
        for arg in self.argv:
            try:
                command.append(PLACEHOLDER_RE.sub(lambda m: _substitute(m, record, missing), arg))
            except NoMatch:
                if missing is MissingPolicy.SKIP:
                    return None
                raise
        return command


def _substitute(match: re.Match[str], record: Fuzip[Fuzippable], missing: MissingPolicy) -> str:
    text = match.group(0)
    if text == "{{":
        return "{"
    if text == "}}":
        return "}"
    index = int(match.group(1)) - 1
    try:
        return record.get(index).display()
    except NoMatch:
        if missing is MissingPolicy.EMPTY:
            return ""
        raise


def run_records(
    records: Iterable[Fuzip[Fuzippable]],
    template: ExecTemplate,
    *,
    missing: MissingPolicy = MissingPolicy.ERROR,
    verbose: bool = False,
    dry_run: bool = False,
) -> int:
    """Run `template` once per record. Returns the number of failed commands."""
    failures = 0
    for record in records:
        command = template.to_command(record, missing)
        if command is None:
            logger.debug("skipping incomplete record: %s", record)
            continue
        if verbose or dry_run:
            logger.info("Running %s", command)
        if dry_run:
            continue
        status = subprocess.run(command, check=False)
        if status.returncode != 0:
            failures += 1
            logger.error("exited with code %d: %s", status.returncode, command)
    return failures
