"""하루 일정의 방문 순서를 정하는 최근접 이웃 경로 정렬."""

from __future__ import annotations

import math
from typing import Sequence

from wayfarer.core.geo import Coordinate, centroid, distance_km
from wayfarer.schemas.attraction import Attraction


def _nearest_index(origin: Coordinate, candidates: Sequence[Attraction]) -> int:
    """`origin`에 가장 가까운 후보의 인덱스. 거리가 같으면 앞선 후보를 고릅니다."""
    nearest_index = 0
    min_distance = math.inf
    for index, candidate in enumerate(candidates):
        distance = distance_km(origin, candidate.location)
        if distance < min_distance:
            min_distance = distance
            nearest_index = index
    return nearest_index


def nearest_neighbor_walk(start: Attraction, remaining: list[Attraction]) -> list[Attraction]:
    """`start`에서 출발해 매번 가장 가까운 미방문 명소로 이동하는 순서를 만듭니다.

    `remaining`은 소비되어 비워집니다.
    """
    route = [start]
    while remaining:
        route.append(remaining.pop(_nearest_index(route[-1].location, remaining)))
    return route


def order_route(attractions: Sequence[Attraction]) -> list[Attraction]:
    """무게중심에 가장 가까운 명소에서 시작하는 최근접 이웃 순서를 반환합니다.

    전역 최적해가 아닌 탐욕적 휴리스틱이며, 결과는 항상 입력의 순열입니다.
    """
    if len(attractions) <= 1:
        return list(attractions)

    remaining = list(attractions)
    center = centroid(a.location for a in remaining)
    start = remaining.pop(_nearest_index(center, remaining))
    return nearest_neighbor_walk(start, remaining)
