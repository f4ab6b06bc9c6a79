"""여행 일정 생성 요청/응답 스키마."""

import datetime

from pydantic import BaseModel, Field, field_validator

from wayfarer.schemas.attraction import Attraction
from wayfarer.schemas.enums import AttractionCategory


class TripRequest(BaseModel):
    """여행 일정 생성 요청 모델.

    Fields:
        `destination`: 여행지 (검색 협력자에게만 전달되는 값)
        `start_date`: 여행 시작일
        `end_date`: 여행 종료일 (시작일 포함, 같은 날이면 당일치기)
        `preferences`: 선호 카테고리 목록 (비어 있을 수 있음)
    """

    destination: str = Field(..., min_length=1, description="여행지")
    start_date: datetime.date = Field(..., description="여행 시작일 (YYYY-MM-DD)")
    end_date: datetime.date = Field(..., description="여행 종료일 (YYYY-MM-DD)")
    preferences: list[AttractionCategory] = Field(default_factory=list, description="선호 카테고리 목록")

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, value: datetime.date, info):
        start_date = info.data.get("start_date")
        if start_date and value < start_date:
            raise ValueError("여행 종료일은 시작일과 같거나 이후여야 합니다.")
        return value


class DayPlan(BaseModel):
    """하루치 방문 순서와 소요 시간 합계.

    `total_duration`은 항상 체류 시간 합계와 `estimated_travel_time`의 합입니다.
    """

    date: datetime.date = Field(..., description="일정 날짜 (YYYY-MM-DD)")
    attractions: list[Attraction] = Field(default_factory=list, description="방문 순서대로 정렬된 명소 목록")
    estimated_travel_time: int = Field(..., ge=0, description="명소 간 이동 시간 합계 (분)")
    total_duration: int = Field(..., ge=0, description="체류 시간과 이동 시간 합계 (분)")


class TripStats(BaseModel):
    """전체 일정 요약 통계."""

    total_attractions: int = Field(..., description="전체 명소 수")
    total_duration: int = Field(..., description="전체 소요 시간 (분)")
    total_travel_time: int = Field(..., description="전체 이동 시간 (분)")
    average_rating: float = Field(..., description="명소 평균 평점")


class ItineraryRequest(BaseModel):
    """일정 생성 API 요청 모델. 후보 명소가 없으면 카탈로그 검색 결과를 사용합니다."""

    request: TripRequest = Field(..., description="여행 요청")
    candidates: list[Attraction] | None = Field(default=None, description="호출자가 직접 제공하는 후보 명소")


class ItineraryResponse(BaseModel):
    """생성된 여행 일정 응답 모델."""

    destination: str = Field(..., description="여행지")
    start_date: datetime.date = Field(..., description="여행 시작일")
    end_date: datetime.date = Field(..., description="여행 종료일")
    trip_days: int = Field(..., description="총 여행 일수")
    itinerary: list[DayPlan] = Field(..., description="일자별 일정 리스트")
    stats: TripStats = Field(..., description="일정 요약 통계")


class DayRecalculateRequest(BaseModel):
    """편집된 하루 일정의 합계 재계산 요청."""

    date: datetime.date = Field(..., description="일정 날짜")
    attractions: list[Attraction] = Field(default_factory=list, description="편집 후 방문 순서")


class DayMoveRequest(BaseModel):
    """하루 일정 안에서 명소 순서를 옮기는 요청."""

    day: DayPlan = Field(..., description="편집 대상 일정")
    source_index: int = Field(..., ge=0, description="옮길 명소의 현재 위치")
    dest_index: int = Field(..., ge=0, description="옮길 위치")


class RouteOptimizeRequest(BaseModel):
    """단일 일자 경로 재최적화 요청."""

    attractions: list[Attraction] = Field(..., description="현재 방문 순서")


class RouteOptimizationResult(BaseModel):
    """경로 재최적화 결과. 절약 값은 음수일 수 있습니다."""

    attractions: list[Attraction] = Field(..., description="재정렬된 방문 순서")
    original_distance_km: float = Field(..., description="기존 순서의 총 이동 거리 (km)")
    optimized_distance_km: float = Field(..., description="재정렬 순서의 총 이동 거리 (km)")
    distance_saved_km: float = Field(..., description="줄어든 거리 (km)")
    time_saved_minutes: int = Field(..., description="줄어든 이동 시간 (분)")
    efficiency_percent: float = Field(..., description="거리 개선율 (%), 5~95 범위로 제한")
