"""여행 일정 생성 작업 처리 서비스."""

from __future__ import annotations

from typing import Sequence

from wayfarer.core.config import get_settings
from wayfarer.core.logger import get_logger
from wayfarer.planning.itinerary import build_itinerary, count_trip_days, summarize_itinerary
from wayfarer.schemas.attraction import Attraction
from wayfarer.schemas.itinerary import ItineraryResponse, TripRequest
from wayfarer.services.catalog import AttractionCatalogProtocol

logger = get_logger(__name__)


class ItineraryGenerationError(RuntimeError):
    """배정된 명소가 하나도 없어 일정을 만들 수 없을 때 발생하는 예외."""


async def generate_itinerary(
    request: TripRequest,
    catalog: AttractionCatalogProtocol,
    candidates: Sequence[Attraction] | None = None,
) -> ItineraryResponse:
    """후보 명소를 확보해 일정을 생성하고 응답 모델로 감쌉니다.

    `candidates`가 주어지면 카탈로그 검색을 건너뜁니다.

    Raises:
        ItineraryGenerationError: 모든 날이 비어 있는 경우.
    """
    logger.info("Itinerary request accepted: %s (%s ~ %s)", request.destination, request.start_date, request.end_date)

    if candidates is None:
        limit = get_settings().ATTRACTION_SEARCH_LIMIT
        candidates = await catalog.search(request.destination, request.preferences, limit=limit)

    days = build_itinerary(request, candidates)
    stats = summarize_itinerary(days)
    if stats.total_attractions == 0:
        raise ItineraryGenerationError(
            f"'{request.destination}'에 대한 일정을 생성하지 못했습니다. 다른 날짜나 선호를 선택해 주세요."
        )

    logger.info("Itinerary generated: %d days, %d attractions", len(days), stats.total_attractions)
    return ItineraryResponse(
        destination=request.destination,
        start_date=request.start_date,
        end_date=request.end_date,
        trip_days=count_trip_days(request.start_date, request.end_date),
        itinerary=days,
        stats=stats,
    )
