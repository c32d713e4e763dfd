"""
Tour Service - Compose parser, synthesizer and assembler into tours
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from fnmatch import fnmatch
from pathlib import Path

from models.diff import ChangeRun, ParseWarning
from models.tour import RevisionInfo, Tour, TourStep

from .diff_generator import DiffGenerator
from .diff_parser import DiffParser
from .git_service import DEFAULT_SHORT_HASH_LENGTH, GitService
from .language import LanguageClassifier
from .step_synthesizer import StepSynthesizer
from .tour_assembler import assemble_tour

logger = logging.getLogger(__name__)


def parse_diff(
    diff_text: str,
    classifier: LanguageClassifier | None = None,
    character_base: int = 1,
) -> list[TourStep]:
    """Pure diff-text -> ordered tour steps"""
    synthesizer = StepSynthesizer(classifier, character_base)
    return list(synthesizer.synthesize_all(DiffParser().iter_runs(diff_text)))


def path_matches(path: str, include: Sequence[str] = (), exclude: Sequence[str] = ()) -> bool:
    """True if *path* matches any include glob (or none given) and no exclude glob"""
    if include and not any(fnmatch(path, pattern) for pattern in include):
        return False
    return not any(fnmatch(path, pattern) for pattern in exclude)


def filter_runs(
    runs: Iterable[ChangeRun],
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
) -> Iterator[ChangeRun]:
    for run in runs:
        if path_matches(run.file_path, include, exclude):
            yield run


class TourService:
    """Build tours from diff text, a repository, or two file contents"""

    def __init__(
        self,
        classifier: LanguageClassifier | None = None,
        character_base: int = 1,
        short_hash_length: int = DEFAULT_SHORT_HASH_LENGTH,
    ):
        self.synthesizer = StepSynthesizer(classifier, character_base)
        self.short_hash_length = short_hash_length
        self.diff_generator = DiffGenerator()
        self.warnings: list[ParseWarning] = []

    @classmethod
    def from_config(cls, config: dict) -> "TourService":
        """Create a service from a ConfigManager config dict"""
        return cls(
            classifier=LanguageClassifier(config.get("languages") or {}),
            character_base=config.get("selection", {}).get("characterBase", 1),
            short_hash_length=config.get("git", {}).get("shortHashLength", DEFAULT_SHORT_HASH_LENGTH),
        )

    def stream_steps(
        self,
        diff_text: str,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
    ) -> Iterator[TourStep]:
        """Lazily yield steps; parser warnings land in self.warnings"""
        parser = DiffParser()
        self.warnings = parser.warnings
        runs = filter_runs(parser.iter_runs(diff_text), include, exclude)
        yield from self.synthesizer.synthesize_all(runs)

    def from_diff(
        self,
        diff_text: str,
        from_info: RevisionInfo,
        to_info: RevisionInfo,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
    ) -> Tour:
        tour = assemble_tour(self.stream_steps(diff_text, include, exclude), from_info, to_info)
        logger.info(
            "Generated tour '%s' with %d steps (%d skipped lines)",
            tour.title,
            len(tour.steps),
            len(self.warnings),
        )
        return tour

    def from_repo(
        self,
        repo_path: str | Path,
        from_ref: str,
        to_ref: str,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
    ) -> Tour:
        """Resolve both refs, diff them, and build the tour"""
        git_service = GitService(repo_path, self.short_hash_length)
        from_info = git_service.resolve(from_ref)
        to_info = git_service.resolve(to_ref)
        diff_text = git_service.diff(from_ref, to_ref)
        return self.from_diff(diff_text, from_info, to_info, include, exclude)

    def from_contents(
        self,
        file_path: str,
        original_content: str,
        new_content: str,
        from_info: RevisionInfo,
        to_info: RevisionInfo,
    ) -> Tour:
        """Build a tour for a single file from its before/after content"""
        generated = self.diff_generator.generate_diff(original_content, new_content, file_path)
        return self.from_diff(generated.unified_diff, from_info, to_info)
