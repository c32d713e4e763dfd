"""Tour Assembler - Wrap ordered steps into a titled tour"""

from __future__ import annotations

from collections.abc import Iterable

from models.tour import RevisionInfo, Tour, TourStep


def tour_title(from_info: RevisionInfo, to_info: RevisionInfo) -> str:
    return f"Changes from {from_info.short_hash} to {to_info.short_hash}"


def tour_description(from_info: RevisionInfo, to_info: RevisionInfo) -> str:
    return (
        "Diff between commits:\n"
        f"- From: {from_info.short_hash} - {from_info.message}\n"
        f"- To: {to_info.short_hash} - {to_info.message}"
    )


def assemble_tour(
    steps: Iterable[TourStep],
    from_info: RevisionInfo,
    to_info: RevisionInfo,
) -> Tour:
    """Build the final tour; steps are kept exactly in the order given"""
    return Tour(
        title=tour_title(from_info, to_info),
        description=tour_description(from_info, to_info),
        steps=list(steps),
    )
