from __future__ import annotations

from typing import Iterable

from src.domain.models.realtime import (
    Deviation,
    RealtimeDestination,
    RealtimePlatform,
    RealtimeVisit,
)


def group_visits_by_destination(
    visits: Iterable[RealtimeVisit],
) -> tuple[RealtimeDestination, ...]:
    """Group visits by (line_id, destination_name).

    Group order and each group's representative fields follow the first visit
    seen for that key.
    """

    groups: dict[tuple[int, str], list[RealtimeVisit]] = {}
    for visit in visits:
        groups.setdefault((visit.line_id, visit.destination_name), []).append(visit)

    out: list[RealtimeDestination] = []
    for members in groups.values():
        head = members[0]
        out.append(
            RealtimeDestination(
                stop_id=head.stop_id,
                line_id=head.line_id,
                name=head.name,
                destination_name=head.destination_name,
                line_colour=head.line_colour,
                transportation_type=head.transportation_type,
                visits=tuple(members),
            )
        )
    return tuple(out)


def group_visits_by_platform(
    visits: Iterable[RealtimeVisit],
) -> tuple[RealtimePlatform, ...]:
    """Group visits by platform name, skipping visits without one."""

    groups: dict[str, list[RealtimeVisit]] = {}
    for visit in visits:
        if not visit.platform:
            continue
        groups.setdefault(visit.platform, []).append(visit)

    return tuple(
        RealtimePlatform(name=name, visits=tuple(members))
        for name, members in groups.items()
    )


def collect_unique_deviations(
    visits: Iterable[RealtimeVisit],
) -> tuple[Deviation, ...]:
    # Set semantics; dict keeps first-seen order for stable output.
    seen: dict[Deviation, None] = {}
    for visit in visits:
        for deviation in visit.deviations:
            seen.setdefault(deviation, None)
    return tuple(seen)
