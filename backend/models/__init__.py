"""Models module - Pydantic data models"""

from .diff import ChangeRun, GeneratedDiff, ParseWarning
from .tour import Position, RevisionInfo, Selection, StepKind, Tour, TourStep
from .requests import (
    FilterOptions,
    StreamEvent,
    TourFromContentsRequest,
    TourFromDiffRequest,
    TourFromRepoRequest,
    TourResponse,
)

__all__ = [
    # Diff models
    "ChangeRun",
    "GeneratedDiff",
    "ParseWarning",
    # Tour models
    "Position",
    "RevisionInfo",
    "Selection",
    "StepKind",
    "Tour",
    "TourStep",
    # API models
    "FilterOptions",
    "StreamEvent",
    "TourFromContentsRequest",
    "TourFromDiffRequest",
    "TourFromRepoRequest",
    "TourResponse",
]
