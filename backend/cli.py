"""
git2codetour command line interface

    git2codetour <from-commit> <to-commit> [-r REPO] [-o OUTPUT]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from services.config_manager import ConfigManager
from services.git_service import GitService, GitServiceError
from services.language import LanguageClassifier
from services.step_synthesizer import CHARACTER_BASES
from services.tour_service import TourService

logger = logging.getLogger("git2codetour")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git2codetour",
        description="Generate CodeTour from git commit diff",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument("from_commit", metavar="from-commit", help="Starting commit reference")
    parser.add_argument("to_commit", metavar="to-commit", help="Ending commit reference")
    parser.add_argument("-r", "--repo", default=".", help="Path to git repository (default: cwd)")
    parser.add_argument("-o", "--output", help="Output file path (default: stdout)")
    parser.add_argument(
        "--include",
        action="append",
        default=None,
        metavar="GLOB",
        help="Only include files matching this glob (repeatable)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="GLOB",
        help="Skip files matching this glob (repeatable)",
    )
    parser.add_argument(
        "--diff-file",
        help="Read diff text from this file ('-' for stdin) instead of running git diff",
    )
    parser.add_argument(
        "--character-base",
        type=int,
        choices=CHARACTER_BASES,
        default=None,
        help="Selection character offset convention (default: from config, 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def read_diff_file(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def generate(args: argparse.Namespace, config: ConfigManager):
    repo_path = Path(args.repo).resolve()
    logger.debug("Generating tour %s..%s in %s", args.from_commit, args.to_commit, repo_path)
    if not (repo_path / ".git").exists():
        raise GitServiceError(f"Not a git repository: {repo_path}")

    character_base = args.character_base
    if character_base is None:
        character_base = config.character_base()

    service = TourService(
        classifier=LanguageClassifier(config.language_overrides()),
        character_base=character_base,
        short_hash_length=config.short_hash_length(),
    )

    filters = config.get("filters", {}) or {}
    include = args.include if args.include is not None else filters.get("include", [])
    exclude = args.exclude if args.exclude is not None else filters.get("exclude", [])

    if args.diff_file:
        git_service = GitService(repo_path, config.short_hash_length())
        from_info = git_service.resolve(args.from_commit)
        to_info = git_service.resolve(args.to_commit)
        return service.from_diff(read_diff_file(args.diff_file), from_info, to_info, include, exclude)

    return service.from_repo(repo_path, args.from_commit, args.to_commit, include, exclude)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        tour = generate(args, ConfigManager.get_instance())
        output = tour.to_json(indent=2)

        if args.output:
            output_path = Path(args.output).resolve()
            output_path.write_text(output, encoding="utf-8")
            print(f"CodeTour written to: {output_path}")
        else:
            print(output)
    except (GitServiceError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
