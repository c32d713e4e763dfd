"""
Git Service - Resolve revisions and read diffs from a local repository
"""

from __future__ import annotations

import logging
from pathlib import Path

import git  # GitPython
from git.exc import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from models.tour import RevisionInfo

logger = logging.getLogger(__name__)

DEFAULT_SHORT_HASH_LENGTH = 7


class GitServiceError(RuntimeError):
    """Base error for repository access failures"""


class InvalidRepositoryError(GitServiceError):
    """Path is missing or is not a git repository"""


class InvalidRevisionError(GitServiceError):
    """A commit reference could not be resolved"""


class GitService:
    """Thin wrapper over GitPython for the two operations a tour needs"""

    def __init__(self, repo_path: str | Path, short_hash_length: int = DEFAULT_SHORT_HASH_LENGTH):
        self.repo_path = Path(repo_path).resolve()
        self.short_hash_length = short_hash_length
        try:
            self.repo = git.Repo(self.repo_path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise InvalidRepositoryError(f"Not a git repository: {self.repo_path}") from e

    def resolve(self, ref: str) -> RevisionInfo:
        """Resolve *ref* to its short hash and commit summary"""
        if not ref or ref.startswith("-"):
            raise InvalidRevisionError(f"Invalid commit reference: {ref}")
        try:
            sha = self.repo.git.rev_parse("--verify", "--quiet", f"{ref}^{{commit}}")
            commit = self.repo.commit(sha)
        except (BadName, BadObject, GitCommandError, IndexError, ValueError) as e:
            raise InvalidRevisionError(f"Invalid commit reference: {ref}") from e

        logger.debug("Resolved %s -> %s", ref, commit.hexsha)
        message = commit.summary
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        return RevisionInfo(
            short_hash=commit.hexsha[: self.short_hash_length] or ref,
            message=message,
        )

    def diff(self, from_ref: str, to_ref: str) -> str:
        """Return `git diff <from> <to>` output"""
        logger.debug("Running git diff %s %s in %s", from_ref, to_ref, self.repo_path)
        try:
            raw: bytes = self.repo.git.diff(
                "--no-color",
                "--no-ext-diff",
                "--src-prefix=a/",
                "--dst-prefix=b/",
                from_ref,
                to_ref,
                stdout_as_string=False,
            )
        except GitCommandError as e:
            raise GitServiceError(f"git diff failed: {e}") from e
        # file content is not necessarily UTF-8
        return raw.decode("utf-8", errors="replace")
