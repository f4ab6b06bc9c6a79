"""명소 검색 협력자.

일정 생성 엔진에 후보 명소를 공급하는 인터페이스와, 내장 데이터로 동작하는 정적 카탈로그를 제공합니다.
검색 결과 캐시는 모듈 전역이 아니라 카탈로그 인스턴스가 소유한 `SearchCache` 객체에 둡니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Sequence

from wayfarer.core.config import get_settings
from wayfarer.core.logger import get_logger
from wayfarer.schemas.attraction import Attraction
from wayfarer.schemas.enums import AttractionCategory

logger = get_logger(__name__)

CacheKey = tuple[str, tuple[str, ...], int]


class AttractionCatalogProtocol(ABC):
    """후보 명소 검색을 위한 인터페이스를 정의합니다."""

    @abstractmethod
    async def search(
        self,
        destination: str,
        preferences: Sequence[AttractionCategory | str],
        limit: int = 20,
    ) -> list[Attraction]:
        """여행지의 후보 명소를 검색합니다.

        Args:
            destination: 여행지 이름
            preferences: 선호 카테고리 (정렬 우선순위에만 사용)
            limit: 최대 반환 개수

        Returns:
            좌표와 체류 시간이 채워진 명소 목록
        """
        raise NotImplementedError


class SearchCache:
    """검색 키별 결과를 보관하는 LRU 캐시."""

    def __init__(self, max_entries: int = 128) -> None:
        self._max_entries = max(1, max_entries)
        self._entries: OrderedDict[CacheKey, list[Attraction]] = OrderedDict()

    @staticmethod
    def build_key(destination: str, preferences: Sequence[str], limit: int) -> CacheKey:
        return (destination.strip().lower(), tuple(str(p) for p in preferences), limit)

    def get(self, key: CacheKey) -> list[Attraction] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return list(entry)

    def put(self, key: CacheKey, attractions: list[Attraction]) -> None:
        self._entries[key] = list(attractions)
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def _sample(
    attraction_id: str,
    name: str,
    category: AttractionCategory,
    latitude: float,
    longitude: float,
    duration: int,
    rating: float,
    address: str,
    description: str,
) -> Attraction:
    return Attraction(
        id=attraction_id,
        name=name,
        category=category,
        description=description,
        latitude=latitude,
        longitude=longitude,
        estimated_duration=duration,
        rating=rating,
        address=address,
    )


class StaticAttractionCatalog(AttractionCatalogProtocol):
    """내장 도시 데이터를 반환하는 카탈로그.

    외부 API 없이 동작하며, 선호 카테고리 명소를 앞에 두는 안정 정렬 후 `limit`개로 자릅니다.
    등록되지 않은 여행지는 빈 목록을 반환합니다.
    """

    _CITY_ATTRACTIONS: dict[str, list[Attraction]] = {
        "san francisco": [
            _sample(
                "1", "Golden Gate Bridge", AttractionCategory.PARKS_NATURE, 37.8199, -122.4783, 90, 4.7,
                "Golden Gate Bridge, San Francisco, CA", "Iconic suspension bridge and symbol of San Francisco",
            ),
            _sample(
                "2", "Alcatraz Island", AttractionCategory.HISTORICAL_SITES, 37.8267, -122.4230, 180, 4.5,
                "Alcatraz Island, San Francisco, CA", "Former federal prison on an island in San Francisco Bay",
            ),
            _sample(
                "3", "Fisherman's Wharf", AttractionCategory.RESTAURANTS_FOODIE, 37.8080, -122.4177, 120, 4.2,
                "Fisherman's Wharf, San Francisco, CA", "Waterfront area with seafood restaurants and shops",
            ),
            _sample(
                "4", "Lombard Street", AttractionCategory.HISTORICAL_SITES, 37.8021, -122.4187, 45, 4.0,
                "Lombard Street, San Francisco, CA", "Famous crooked street with eight hairpin turns",
            ),
            _sample(
                "5", "Golden Gate Park", AttractionCategory.PARKS_NATURE, 37.7694, -122.4862, 180, 4.6,
                "Golden Gate Park, San Francisco, CA", "Large urban park with gardens, museums and lakes",
            ),
            _sample(
                "6", "Museum of Modern Art", AttractionCategory.MUSEUMS_GALLERIES, 37.7857, -122.4011, 150, 4.4,
                "151 3rd St, San Francisco, CA 94103", "Modern and contemporary art collection",
            ),
            _sample(
                "7", "Chinatown", AttractionCategory.ART_CULTURE, 37.7941, -122.4078, 120, 4.3,
                "Chinatown, San Francisco, CA", "Oldest Chinatown in North America",
            ),
            _sample(
                "8", "Union Square", AttractionCategory.SHOPPING_DISTRICTS, 37.7880, -122.4074, 90, 4.1,
                "Union Square, San Francisco, CA", "Shopping, dining and entertainment plaza",
            ),
        ],
        "new york": [
            _sample(
                "9", "Central Park", AttractionCategory.PARKS_NATURE, 40.7829, -73.9654, 180, 4.7,
                "Central Park, New York, NY", "Urban park in the middle of Manhattan",
            ),
            _sample(
                "10", "Statue of Liberty", AttractionCategory.HISTORICAL_SITES, 40.6892, -74.0445, 240, 4.6,
                "Liberty Island, New York, NY", "Colossal statue on Liberty Island",
            ),
            _sample(
                "11", "Times Square", AttractionCategory.NIGHTLIFE, 40.7580, -73.9855, 90, 4.2,
                "Times Square, New York, NY", "Bright lights and Broadway theatres",
            ),
            _sample(
                "12", "Metropolitan Museum", AttractionCategory.MUSEUMS_GALLERIES, 40.7794, -73.9632, 180, 4.8,
                "1000 5th Ave, New York, NY 10028", "One of the largest art museums in the world",
            ),
        ],
    }

    def __init__(self, cache: SearchCache | None = None) -> None:
        self._cache = cache or SearchCache()

    @classmethod
    def from_settings(cls) -> StaticAttractionCatalog:
        """애플리케이션 설정으로 카탈로그 인스턴스를 생성합니다."""
        settings = get_settings()
        return cls(cache=SearchCache(max_entries=settings.SEARCH_CACHE_MAX_ENTRIES))

    @property
    def cache(self) -> SearchCache:
        return self._cache

    def _resolve_city(self, destination: str) -> str | None:
        normalized = destination.strip().lower()
        if normalized in self._CITY_ATTRACTIONS:
            return normalized
        for city in self._CITY_ATTRACTIONS:
            if city in normalized:
                return city
        return None

    async def search(
        self,
        destination: str,
        preferences: Sequence[AttractionCategory | str],
        limit: int = 20,
    ) -> list[Attraction]:
        key = SearchCache.build_key(destination, preferences, limit)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        city = self._resolve_city(destination)
        if city is None:
            logger.info("No catalog entry for destination: %s", destination)
            return []

        wanted = set(preferences)
        ranked = sorted(self._CITY_ATTRACTIONS[city], key=lambda a: a.category not in wanted)
        results = ranked[: max(0, limit)]
        self._cache.put(key, results)
        return results
