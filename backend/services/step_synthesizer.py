"""
Step Synthesizer - Render change runs into CodeTour steps
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from models.diff import ChangeRun
from models.tour import Position, Selection, TourStep

from .language import LanguageClassifier

CHARACTER_BASES = (0, 1)


def code_fence(language: str, lines: list[str]) -> str:
    return f"```{language}\n" + "\n".join(lines) + "\n```"


class StepSynthesizer:
    """Convert one change run into one or two tour steps"""

    def __init__(
        self,
        classifier: LanguageClassifier | None = None,
        character_base: int = 1,
    ):
        if character_base not in CHARACTER_BASES:
            raise ValueError(f"character_base must be 0 or 1, got {character_base}")
        self.classifier = classifier or LanguageClassifier()
        self.character_base = character_base

    def synthesize(self, run: ChangeRun) -> list[TourStep]:
        if run.is_new_file:
            return self._new_file_steps(run)
        return [self._modification_step(run)]

    def synthesize_all(self, runs: Iterable[ChangeRun]) -> Iterator[TourStep]:
        for run in runs:
            yield from self.synthesize(run)

    # ========== New files ==========

    def _new_file_steps(self, run: ChangeRun) -> list[TourStep]:
        path = run.file_path
        if not run.added_lines:
            # Degenerate: created file without content
            return [
                TourStep.create_file(
                    description=f"Create a new file:\n\n>> touch {path}",
                    title=f"Create {path}",
                )
            ]

        language = self.classifier.classify(path)
        return [
            TourStep.create_file(
                description=(
                    "Create an empty file:\n\n"
                    f"For Linux/Mac:\n>> touch {path}\n\n"
                    f"For Windows: >> type nul > {path}"
                ),
                title=f"Create {path}",
            ),
            TourStep.add_content_to_file(
                file=path,
                description="Add the following content:\n\n" + code_fence(language, run.added_lines),
                title=f"Add content to {path}",
            ),
        ]

    # ========== Modifications ==========

    def _modification_step(self, run: ChangeRun) -> TourStep:
        language = self.classifier.classify(run.file_path)

        if run.deleted_lines:
            if run.added_lines:
                description = "Replace with:\n\n----\n\n" + code_fence(language, run.added_lines)
            else:
                description = "Remove the selected code"
            return TourStep.replacement(
                file=run.file_path,
                selection=self.selection_for(run),
                description=description,
            )

        return TourStep.addition(
            file=run.file_path,
            line=run.start_line,
            description="Add the following:\n\n" + code_fence(language, run.added_lines),
        )

    def selection_for(self, run: ChangeRun) -> Selection:
        """Range covering the deleted lines, as they sat before removal"""
        end_line = run.start_line + len(run.deleted_lines) - 1
        return Selection(
            start=Position(line=run.start_line, character=self.character_base),
            end=Position(
                line=end_line,
                character=len(run.deleted_lines[-1]) + self.character_base,
            ),
        )
