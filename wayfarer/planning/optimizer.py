"""편집된 하루 일정의 방문 순서를 다시 최적화합니다."""

from __future__ import annotations

from typing import Sequence

from wayfarer.planning.routing import nearest_neighbor_walk
from wayfarer.planning.travel_time import MINUTES_PER_KM, round_half_up, route_distance_km
from wayfarer.schemas.attraction import Attraction
from wayfarer.schemas.itinerary import RouteOptimizationResult

MIN_OPTIMIZABLE_ATTRACTIONS = 3
_MIN_EFFICIENCY_PERCENT = 5.0
_MAX_EFFICIENCY_PERCENT = 95.0


def reoptimize_route(attractions: Sequence[Attraction]) -> RouteOptimizationResult:
    """첫 명소를 고정한 최근접 이웃 순서로 재정렬하고 절약량을 보고합니다.

    일정 생성의 무게중심 시작점과 달리 기존 첫 방문지에서 출발합니다. 휴리스틱이 기존 순서보다
    나쁠 수 있으므로 `distance_saved_km`는 음수가 될 수 있고 그대로 보고합니다.
    명소가 3개 미만이면 입력 순서를 그대로 돌려주고 절약량은 0입니다.
    """
    original = list(attractions)
    original_km = route_distance_km(original)

    if len(original) < MIN_OPTIMIZABLE_ATTRACTIONS:
        return RouteOptimizationResult(
            attractions=original,
            original_distance_km=original_km,
            optimized_distance_km=original_km,
            distance_saved_km=0.0,
            time_saved_minutes=0,
            efficiency_percent=0.0,
        )

    optimized = nearest_neighbor_walk(original[0], original[1:])
    optimized_km = route_distance_km(optimized)
    saved_km = original_km - optimized_km

    efficiency = 0.0
    if original_km > 0:
        efficiency = min(_MAX_EFFICIENCY_PERCENT, max(_MIN_EFFICIENCY_PERCENT, saved_km / original_km * 100))

    return RouteOptimizationResult(
        attractions=optimized,
        original_distance_km=original_km,
        optimized_distance_km=optimized_km,
        distance_saved_km=saved_km,
        time_saved_minutes=round_half_up(saved_km * MINUTES_PER_KM),
        efficiency_percent=efficiency,
    )
