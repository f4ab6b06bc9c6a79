"""거리 기반 이동 시간 추정.

실제 도로망이나 교통 정보는 사용하지 않고, 도보/대중교통/정체를 합친 도심 평균 속도(약 20km/h)를
km당 3분이라는 고정 상수로 환산합니다.
"""

from __future__ import annotations

import math
from typing import Sequence

from wayfarer.core.geo import distance_km
from wayfarer.schemas.attraction import Attraction

MINUTES_PER_KM = 3


def round_half_up(value: float) -> int:
    """0.5를 항상 올림 방향으로 처리하는 반올림 (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def travel_minutes(origin: Attraction, destination: Attraction) -> int:
    """두 명소 사이의 예상 이동 시간(분)을 반환합니다."""
    return round_half_up(distance_km(origin.location, destination.location) * MINUTES_PER_KM)


def route_distance_km(attractions: Sequence[Attraction]) -> float:
    """방문 순서대로 인접한 명소 간 거리의 합을 반환합니다."""
    return sum(
        distance_km(attractions[i - 1].location, attractions[i].location) for i in range(1, len(attractions))
    )


def route_travel_minutes(attractions: Sequence[Attraction]) -> int:
    """방문 순서대로 인접한 명소 간 이동 시간의 합을 반환합니다."""
    return sum(travel_minutes(attractions[i - 1], attractions[i]) for i in range(1, len(attractions)))


def format_duration(total_minutes: int) -> str:
    """분 단위 시간을 `45m`, `2h`, `1h 30m` 형식으로 포맷합니다."""
    normalized = max(0, int(total_minutes))
    hours, minutes = divmod(normalized, 60)
    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"
