"""Tour generation API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse

from models.requests import (
    FilterOptions,
    StreamEvent,
    TourFromContentsRequest,
    TourFromDiffRequest,
    TourFromRepoRequest,
    TourResponse,
)
from services.config_manager import ConfigManager
from services.git_service import GitServiceError, InvalidRepositoryError
from services.tour_service import TourService

router = APIRouter()


def get_tour_service() -> TourService:
    config = ConfigManager.get_instance().get_config()
    try:
        return TourService.from_config(config)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Invalid configuration: {e}")


def resolve_filters(filters: FilterOptions | None) -> tuple[list[str], list[str]]:
    """Request filters win; otherwise fall back to the configured defaults"""
    if filters is not None:
        return filters.include, filters.exclude
    configured = ConfigManager.get_instance().get_config().get("filters", {})
    return configured.get("include", []), configured.get("exclude", [])


@router.post("/from-diff", response_model=TourResponse, response_model_exclude_none=True)
async def tour_from_diff(request: TourFromDiffRequest) -> TourResponse:
    """Build a tour from diff text produced elsewhere"""
    service = get_tour_service()
    include, exclude = resolve_filters(request.filters)

    tour = service.from_diff(
        request.diff,
        request.from_revision,
        request.to_revision,
        include=include,
        exclude=exclude,
    )
    return TourResponse(tour=tour, warnings=service.warnings)


@router.post("/from-repo", response_model=TourResponse, response_model_exclude_none=True)
async def tour_from_repo(request: TourFromRepoRequest) -> TourResponse:
    """Build a tour between two revisions of a local repository"""
    service = get_tour_service()
    include, exclude = resolve_filters(request.filters)

    try:
        tour = service.from_repo(
            request.repo_path,
            request.from_ref,
            request.to_ref,
            include=include,
            exclude=exclude,
        )
    except InvalidRepositoryError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except GitServiceError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TourResponse(tour=tour, warnings=service.warnings)


@router.post("/from-contents", response_model=TourResponse, response_model_exclude_none=True)
async def tour_from_contents(request: TourFromContentsRequest) -> TourResponse:
    """Build a tour for one file from its before/after content"""
    service = get_tour_service()

    tour = service.from_contents(
        request.file_path,
        request.original_content,
        request.new_content,
        request.from_revision,
        request.to_revision,
    )
    return TourResponse(tour=tour, warnings=service.warnings)


@router.post("/stream")
async def tour_stream(request: TourFromDiffRequest):
    """Stream tour steps as they are synthesized (SSE)"""
    service = get_tour_service()
    include, exclude = resolve_filters(request.filters)

    async def event_generator():
        count = 0
        try:
            for step in service.stream_steps(request.diff, include, exclude):
                event = StreamEvent(type="step", index=count, step=step.model_dump(exclude_none=True))
                yield {"event": "message", "data": event.model_dump_json()}
                count += 1

            event = StreamEvent(
                type="done",
                done=True,
                metadata={
                    "total_steps": count,
                    "warnings": [w.model_dump() for w in service.warnings],
                },
            )
            yield {"event": "message", "data": event.model_dump_json()}

        except Exception as e:
            event = StreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())
