"""명소를 일자별 지리 클러스터로 나누는 모듈."""

from __future__ import annotations

import math
from typing import Sequence

from wayfarer.core.geo import BoundingBox, Coordinate, distance_km
from wayfarer.schemas.attraction import Attraction

# 클러스터당 허용 개수 = ceil(전체 / 일수) + 여유분
_CLUSTER_SLACK = 2


def _seed_centers(bounds: BoundingBox, day_count: int) -> list[Coordinate]:
    """경계 사각형 대각선 위에 일수만큼 중심점을 등간격으로 배치합니다."""
    return [bounds.interpolate(i / (day_count - 1)) for i in range(day_count)]


def _nearest_center_index(location: Coordinate, centers: Sequence[Coordinate]) -> int:
    nearest_index = 0
    min_distance = math.inf
    for index, center in enumerate(centers):
        distance = distance_km(location, center)
        if distance < min_distance:
            min_distance = distance
            nearest_index = index
    return nearest_index


def _largest_index(clusters: list[list[Attraction]]) -> int:
    largest = 0
    for index, cluster in enumerate(clusters):
        if len(cluster) > len(clusters[largest]):
            largest = index
    return largest


def _smallest_index(clusters: list[list[Attraction]]) -> int:
    smallest = 0
    for index, cluster in enumerate(clusters):
        if len(cluster) < len(clusters[smallest]):
            smallest = index
    return smallest


def _balance_clusters(clusters: list[list[Attraction]], max_per_day: int) -> None:
    """빈 클러스터를 채우고 한도를 넘는 클러스터의 초과분을 가장 작은 클러스터로 옮깁니다.

    완전한 균등 분배를 보장하지 않습니다. 옮길 대상이 자기 자신뿐이면 한도를 넘은 채로 멈춥니다.
    """
    for index, cluster in enumerate(clusters):
        if not cluster:
            donor = clusters[_largest_index(clusters)]
            if len(donor) > 1:
                cluster.append(donor.pop())

        while len(cluster) > max_per_day:
            smallest = _smallest_index(clusters)
            if smallest == index:
                break
            clusters[smallest].append(cluster.pop())


def cluster_attractions(attractions: Sequence[Attraction], day_count: int) -> list[list[Attraction]]:
    """명소를 `day_count`개의 지리적 그룹으로 나눕니다.

    k-means와 비슷하게 경계 사각형 대각선에 중심을 두고 가장 가까운 중심에 배정한 뒤,
    한 번의 균형 조정으로 빈 날과 과밀한 날을 줄입니다. 각 그룹 내부 순서는 입력 순서를 따르며
    방문 순서 정렬은 호출자가 `order_route`로 수행합니다.

    Args:
        attractions: 분할할 명소 목록.
        day_count: 여행 일수 (1 이상).

    Returns:
        정확히 `day_count`개의 리스트. 입력이 일수보다 적으면 일부는 비어 있습니다.

    Raises:
        ValueError: `day_count`가 1보다 작은 경우.
    """
    if day_count < 1:
        raise ValueError(f"day_count는 1 이상이어야 합니다: {day_count}")

    if not attractions:
        return [[] for _ in range(day_count)]
    if day_count == 1:
        return [list(attractions)]

    bounds = BoundingBox.from_coordinates(a.location for a in attractions)
    centers = _seed_centers(bounds, day_count)

    clusters: list[list[Attraction]] = [[] for _ in range(day_count)]
    for attraction in attractions:
        clusters[_nearest_center_index(attraction.location, centers)].append(attraction)

    max_per_day = math.ceil(len(attractions) / day_count) + _CLUSTER_SLACK
    _balance_clusters(clusters, max_per_day)
    return clusters
