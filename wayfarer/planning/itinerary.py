"""선호 필터링, 일자별 클러스터링, 경로 정렬을 묶어 여행 일정을 생성합니다."""

from __future__ import annotations

import datetime
from typing import Sequence

from wayfarer.core.logger import get_logger
from wayfarer.planning.clustering import cluster_attractions
from wayfarer.planning.routing import order_route
from wayfarer.planning.travel_time import route_travel_minutes
from wayfarer.schemas.attraction import Attraction
from wayfarer.schemas.enums import AttractionCategory
from wayfarer.schemas.itinerary import DayPlan, TripRequest, TripStats

logger = get_logger(__name__)

MAX_ATTRACTIONS_PER_DAY = 6
MIN_PREFERRED_ATTRACTIONS = 5
TOP_UP_TARGET = 10


def count_trip_days(start_date: datetime.date, end_date: datetime.date) -> int:
    """시작일과 종료일을 모두 포함한 여행 일수."""
    return (end_date - start_date).days + 1


def filter_by_preferences(
    candidates: Sequence[Attraction],
    preferences: Sequence[AttractionCategory | str],
) -> list[Attraction]:
    """선호 카테고리에 맞는 명소만 남깁니다.

    남은 명소가 `MIN_PREFERRED_ATTRACTIONS`개 미만이면 선호 외 명소를 입력 순서대로 덧붙여
    `TOP_UP_TARGET`개까지 채웁니다. 선호가 비어 있으면 후보 전체를 그대로 반환합니다.
    """
    if not preferences:
        return list(candidates)

    wanted = set(preferences)
    filtered = [a for a in candidates if a.category in wanted]
    if len(filtered) < MIN_PREFERRED_ATTRACTIONS:
        others = [a for a in candidates if a.category not in wanted]
        filtered.extend(others[: max(0, TOP_UP_TARGET - len(filtered))])
    return filtered


def build_day_plan(date: datetime.date, attractions: Sequence[Attraction]) -> DayPlan:
    """주어진 방문 순서 그대로 이동 시간과 총 소요 시간을 계산합니다.

    일정 생성과 수동 편집(순서 변경, 추가, 삭제) 모두 이 함수로 합계를 다시 계산합니다.
    """
    ordered = list(attractions)
    travel_time = route_travel_minutes(ordered)
    visit_time = sum(a.estimated_duration for a in ordered)
    return DayPlan(
        date=date,
        attractions=ordered,
        estimated_travel_time=travel_time,
        total_duration=visit_time + travel_time,
    )


def build_itinerary(request: TripRequest, candidates: Sequence[Attraction]) -> list[DayPlan]:
    """여행 요청과 후보 명소로 일자별 일정을 생성합니다.

    예외를 던지지 않고 항상 여행 일수만큼의 `DayPlan`을 반환합니다. 후보가 없으면 모든 날이
    비어 있으며, 이를 사용자 오류로 바꾸는 것은 호출자의 몫입니다.
    """
    day_count = count_trip_days(request.start_date, request.end_date)

    if not candidates:
        logger.warning("No attractions available for itinerary generation: %s", request.destination)
        selected: list[Attraction] = []
    else:
        filtered = filter_by_preferences(candidates, request.preferences)
        total_allowed = min(len(filtered), day_count * MAX_ATTRACTIONS_PER_DAY)
        selected = filtered[:total_allowed]
        logger.debug(
            "Selected %d of %d candidates (%d after preference filter) for %d days",
            len(selected),
            len(candidates),
            len(filtered),
            day_count,
        )

    clusters = cluster_attractions(selected, day_count)

    return [
        build_day_plan(request.start_date + datetime.timedelta(days=i), order_route(clusters[i]))
        for i in range(day_count)
    ]


def move_attraction(day: DayPlan, source_index: int, dest_index: int) -> DayPlan:
    """명소 하나를 같은 날의 다른 위치로 옮기고 합계를 다시 계산합니다."""
    attractions = list(day.attractions)
    if not 0 <= source_index < len(attractions):
        raise IndexError(f"source_index 범위를 벗어났습니다: {source_index}")
    if not 0 <= dest_index < len(attractions):
        raise IndexError(f"dest_index 범위를 벗어났습니다: {dest_index}")

    moved = attractions.pop(source_index)
    attractions.insert(dest_index, moved)
    return build_day_plan(day.date, attractions)


def remove_attraction(day: DayPlan, index: int) -> DayPlan:
    """지정 위치의 명소를 제거하고 합계를 다시 계산합니다."""
    attractions = list(day.attractions)
    if not 0 <= index < len(attractions):
        raise IndexError(f"index 범위를 벗어났습니다: {index}")

    del attractions[index]
    return build_day_plan(day.date, attractions)


def add_attraction(day: DayPlan, attraction: Attraction) -> DayPlan:
    """명소를 하루 일정 마지막에 추가하고 합계를 다시 계산합니다."""
    return build_day_plan(day.date, [*day.attractions, attraction])


def summarize_itinerary(days: Sequence[DayPlan]) -> TripStats:
    """일정 전체의 명소 수, 소요 시간, 이동 시간, 평균 평점을 집계합니다."""
    attractions = [a for day in days for a in day.attractions]
    total_rating = sum(a.rating for a in attractions)
    return TripStats(
        total_attractions=len(attractions),
        total_duration=sum(day.total_duration for day in days),
        total_travel_time=sum(day.estimated_travel_time for day in days),
        average_rating=total_rating / (len(attractions) or 1),
    )
