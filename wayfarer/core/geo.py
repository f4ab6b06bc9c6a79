"""좌표 간 거리 계산을 위한 지리 유틸리티."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True, slots=True)
class Coordinate:
    """위경도(도 단위) 좌표."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """좌표 집합을 감싸는 최소 위경도 사각형."""

    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float

    def interpolate(self, fraction: float) -> Coordinate:
        """남서쪽 꼭짓점에서 북동쪽 꼭짓점으로 가는 대각선 위의 점을 반환합니다."""
        return Coordinate(
            latitude=self.min_lat + (self.max_lat - self.min_lat) * fraction,
            longitude=self.min_lng + (self.max_lng - self.min_lng) * fraction,
        )

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Coordinate]) -> BoundingBox | None:
        """좌표 집합으로 사각형을 만듭니다. 빈 입력이면 None을 반환합니다."""
        items = list(coordinates)
        if not items:
            return None

        return cls(
            min_lat=min(c.latitude for c in items),
            min_lng=min(c.longitude for c in items),
            max_lat=max(c.latitude for c in items),
            max_lng=max(c.longitude for c in items),
        )


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine 공식으로 두 좌표 사이의 대원 거리(km)를 계산합니다."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def centroid(coordinates: Iterable[Coordinate]) -> Coordinate | None:
    """좌표들의 산술 평균 위치를 반환합니다."""
    items = list(coordinates)
    if not items:
        return None

    return Coordinate(
        latitude=sum(c.latitude for c in items) / len(items),
        longitude=sum(c.longitude for c in items) / len(items),
    )
