"""Tour data models, shaped after the CodeTour file format"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class StepKind(str, Enum):
    """The four shapes a tour step can take"""

    CREATE_FILE = "create_file"
    ADD_CONTENT_TO_FILE = "add_content_to_file"
    ADDITION = "addition"
    REPLACEMENT = "replacement"


class Position(BaseModel):
    line: int
    character: int


class Selection(BaseModel):
    start: Position
    end: Position


class TourStep(BaseModel):
    """A single navigable annotation in a tour"""

    file: str | None = None
    line: int | None = None
    description: str
    title: str | None = None
    selection: Selection | None = None

    @property
    def kind(self) -> StepKind:
        """Discriminate the step shape from the populated fields"""
        if self.file is None:
            return StepKind.CREATE_FILE
        if self.selection is not None:
            return StepKind.REPLACEMENT
        if self.title is not None:
            return StepKind.ADD_CONTENT_TO_FILE
        return StepKind.ADDITION

    @classmethod
    def create_file(cls, description: str, title: str) -> "TourStep":
        return cls(description=description, title=title)

    @classmethod
    def add_content_to_file(cls, file: str, description: str, title: str) -> "TourStep":
        return cls(file=file, line=1, description=description, title=title)

    @classmethod
    def addition(cls, file: str, line: int, description: str) -> "TourStep":
        return cls(file=file, line=line, description=description)

    @classmethod
    def replacement(cls, file: str, selection: Selection, description: str) -> "TourStep":
        return cls(file=file, selection=selection, description=description)


class RevisionInfo(BaseModel):
    """Resolved revision metadata"""

    short_hash: str
    message: str = ""


class Tour(BaseModel):
    """Complete tour document"""

    title: str
    description: str
    steps: list[TourStep] = []

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to CodeTour JSON, omitting unset step fields"""
        return self.model_dump_json(indent=indent, exclude_none=True)
