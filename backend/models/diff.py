"""Diff-related data models"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChangeRun(BaseModel):
    """A contiguous run of added and/or deleted lines within one hunk"""

    file_path: str  # target side
    start_line: int = Field(ge=1)  # 1-indexed, target side
    added_lines: list[str] = []
    deleted_lines: list[str] = []
    is_new_file: bool = False


class ParseWarning(BaseModel):
    """A diff line the parser could not interpret and skipped"""

    line_number: int  # 1-indexed position in the diff text
    line: str
    reason: str


class GeneratedDiff(BaseModel):
    """Git-style unified diff produced from two in-memory contents"""

    file_path: str
    unified_diff: str
    is_new_file: bool = False
