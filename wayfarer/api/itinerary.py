"""여행 일정 생성 및 편집 API."""

from fastapi import APIRouter, Depends, HTTPException

from wayfarer.api.dependencies import get_attraction_catalog, require_service_secret
from wayfarer.core.logger import get_logger
from wayfarer.planning.itinerary import build_day_plan, move_attraction
from wayfarer.planning.optimizer import reoptimize_route
from wayfarer.schemas.itinerary import (
    DayMoveRequest,
    DayPlan,
    DayRecalculateRequest,
    ItineraryRequest,
    ItineraryResponse,
    RouteOptimizationResult,
    RouteOptimizeRequest,
)
from wayfarer.services.catalog import AttractionCatalogProtocol
from wayfarer.services.itinerary_service import ItineraryGenerationError, generate_itinerary

router = APIRouter(prefix="/api/v1", tags=["itinerary"], dependencies=[Depends(require_service_secret)])
logger = get_logger(__name__)

ITINERARY_ERROR_EXAMPLES = {
    422: {
        "no_attractions": {
            "summary": "일정 생성 실패",
            "description": "후보 명소가 없어 모든 날이 비어 있는 경우",
            "value": {"detail": "'Atlantis'에 대한 일정을 생성하지 못했습니다. 다른 날짜나 선호를 선택해 주세요."},
        }
    },
}


@router.post(
    "/itineraries",
    response_model=ItineraryResponse,
    responses={
        422: {
            "description": "일정 생성 실패",
            "content": {"application/json": {"examples": ITINERARY_ERROR_EXAMPLES[422]}},
        }
    },
)
async def create_itinerary(
    body: ItineraryRequest,
    catalog: AttractionCatalogProtocol = Depends(get_attraction_catalog),  # noqa: B008
) -> ItineraryResponse:
    """여행 요청으로 일자별 일정을 생성합니다."""
    try:
        return await generate_itinerary(body.request, catalog, candidates=body.candidates)
    except ItineraryGenerationError as exc:
        logger.warning("Itinerary generation failed: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/itineraries/days/recalculate", response_model=DayPlan)
def recalculate_day(body: DayRecalculateRequest) -> DayPlan:
    """수동 편집된 방문 순서로 하루 합계를 다시 계산합니다."""
    return build_day_plan(body.date, body.attractions)


@router.post("/itineraries/days/move", response_model=DayPlan)
def move_day_attraction(body: DayMoveRequest) -> DayPlan:
    """하루 일정 안에서 명소 위치를 옮깁니다."""
    try:
        return move_attraction(body.day, body.source_index, body.dest_index)
    except IndexError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/routes/optimize", response_model=RouteOptimizationResult)
def optimize_route(body: RouteOptimizeRequest) -> RouteOptimizationResult:
    """첫 방문지를 고정한 채 하루 경로를 재정렬합니다."""
    result = reoptimize_route(body.attractions)
    logger.info(
        "Route optimized: %d attractions, %.2f km saved",
        len(result.attractions),
        result.distance_saved_km,
    )
    return result
