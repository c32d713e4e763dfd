"""
Diff Parser - Turn unified diff text into change runs

The parser is a line-driven state machine. It only tracks target-side line
numbers: added and context lines advance the cursor, deleted lines and
"\\ No newline at end of file" markers do not.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from models.diff import ChangeRun, ParseWarning

logger = logging.getLogger(__name__)

_FILE_HEADER_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")
_HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

FILE_HEADER_PREFIX = "diff --git"
SOURCE_ABSENT_MARKER = "--- /dev/null"
TARGET_PREFIX = "+++ b/"


class DiffParser:
    """Finite-state machine over the lines of a git diff"""

    def __init__(self):
        self.current_file = ""
        self.cursor = 0
        self.run_start = 0  # 0 = unset
        self.added_lines: list[str] = []
        self.deleted_lines: list[str] = []
        self.is_new_file = False
        self.in_hunk = False

        self.line_number = 0
        self.warnings: list[ParseWarning] = []

    @property
    def has_pending_run(self) -> bool:
        return bool(self.added_lines or self.deleted_lines)

    def _flush(self, start_line: int) -> ChangeRun | None:
        """Hand off the accumulated run and reset the accumulator"""
        if not self.current_file or not self.has_pending_run:
            self.added_lines = []
            self.deleted_lines = []
            self.run_start = 0
            return None

        run = ChangeRun(
            file_path=self.current_file,
            start_line=max(start_line, 1),
            added_lines=self.added_lines,
            deleted_lines=self.deleted_lines,
            is_new_file=self.is_new_file,
        )
        self.added_lines = []
        self.deleted_lines = []
        self.run_start = 0
        return run

    def _warn(self, line: str, reason: str) -> None:
        warning = ParseWarning(line_number=self.line_number, line=line, reason=reason)
        self.warnings.append(warning)
        logger.warning("Skipping diff line %d (%s): %r", self.line_number, reason, line)

    def feed(self, line: str) -> ChangeRun | None:
        """Consume one diff line; return a completed run if this line closed one"""
        self.line_number += 1

        if line.startswith(FILE_HEADER_PREFIX):
            run = self._flush(self.run_start)
            match = _FILE_HEADER_RE.match(line)
            if match:
                self.current_file = match.group(2)
            else:
                self.current_file = ""
                self._warn(line, "unrecognized file header")
            self.cursor = 0
            self.is_new_file = False
            self.in_hunk = False
            return run

        if line.startswith(SOURCE_ABSENT_MARKER):
            self.is_new_file = True

        if line.startswith("@@"):
            match = _HUNK_HEADER_RE.match(line)
            if not match:
                self._warn(line, "malformed hunk header")
                self.in_hunk = False
                return None
            run = self._flush(self.run_start)
            self.cursor = int(match.group(3))
            self.run_start = 0
            self.in_hunk = True
            return run

        if not self.in_hunk:
            # quoted or unusual header paths; take the target path from "+++ b/"
            if not self.current_file and line.startswith(TARGET_PREFIX):
                self.current_file = line[len(TARGET_PREFIX):]
            return None

        if line.startswith("+") and not line.startswith("+++"):
            if not self.run_start:
                self.run_start = self.cursor
            self.added_lines.append(line[1:])
            self.cursor += 1
            return None

        if line.startswith("-") and not line.startswith("---"):
            if not self.run_start:
                self.run_start = self.cursor
            self.deleted_lines.append(line[1:])
            return None

        if line.startswith("\\"):
            return None

        # context line
        run = self._flush(self.run_start or self.cursor)
        self.cursor += 1
        return run

    def finish(self) -> ChangeRun | None:
        """Flush whatever is left at end of input"""
        run = self._flush(self.run_start or 1)
        self.in_hunk = False
        return run

    def iter_runs(self, diff_text: str) -> Iterator[ChangeRun]:
        for line in diff_text.split("\n"):
            run = self.feed(line)
            if run is not None:
                yield run
        run = self.finish()
        if run is not None:
            yield run

    def parse(self, diff_text: str) -> list[ChangeRun]:
        return list(self.iter_runs(diff_text))


def iter_change_runs(diff_text: str) -> Iterator[ChangeRun]:
    """Lazily yield change runs in diff order"""
    return DiffParser().iter_runs(diff_text)
