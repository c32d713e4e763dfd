"""Request/response models for the tour API"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import ParseWarning
from .tour import RevisionInfo, Tour


class FilterOptions(BaseModel):
    """Glob filters applied to change-run file paths"""

    include: list[str] = []
    exclude: list[str] = []


class TourFromDiffRequest(BaseModel):
    """Build a tour from diff text produced elsewhere"""

    diff: str
    from_revision: RevisionInfo
    to_revision: RevisionInfo
    filters: FilterOptions | None = None


class TourFromRepoRequest(BaseModel):
    """Build a tour from two revisions of a local git repository"""

    repo_path: str
    from_ref: str
    to_ref: str
    filters: FilterOptions | None = None


class TourFromContentsRequest(BaseModel):
    """Build a tour from the before/after content of a single file"""

    file_path: str
    original_content: str = ""
    new_content: str
    from_revision: RevisionInfo = RevisionInfo(short_hash="original")
    to_revision: RevisionInfo = RevisionInfo(short_hash="modified")


class TourResponse(BaseModel):
    """Generated tour plus any diff lines that were skipped"""

    tour: Tour
    warnings: list[ParseWarning] = []


class StreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "step", "done", "error"
    step: dict | None = None
    index: int | None = None
    metadata: dict | None = None
    done: bool = False
    error: str | None = None
