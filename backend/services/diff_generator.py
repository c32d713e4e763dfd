"""
Diff Generator Service - Produce git-style diffs from in-memory content
"""

from __future__ import annotations

from difflib import unified_diff

from models.diff import GeneratedDiff

DEV_NULL = "/dev/null"


class DiffGenerator:
    """Generate unified diffs in the layout `git diff` emits"""

    def __init__(self, context_lines: int = 3):
        self.context_lines = context_lines

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        file_path: str,
    ) -> GeneratedDiff:
        """Diff two versions of *file_path*; empty original means a new file"""
        original_lines = original_content.splitlines()
        new_lines = new_content.splitlines()
        is_new_file = not original_content

        body = list(
            unified_diff(
                original_lines,
                new_lines,
                fromfile=DEV_NULL if is_new_file else f"a/{file_path}",
                tofile=f"b/{file_path}",
                n=self.context_lines,
                lineterm="",
            )
        )

        # No differences: nothing to report, not even the file header
        if not body:
            return GeneratedDiff(file_path=file_path, unified_diff="", is_new_file=False)

        header = [f"diff --git a/{file_path} b/{file_path}"]
        if is_new_file:
            header.append("new file mode 100644")

        return GeneratedDiff(
            file_path=file_path,
            unified_diff="\n".join(header + body) + "\n",
            is_new_file=is_new_file,
        )
