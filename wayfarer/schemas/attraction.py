"""명소(방문 가능한 장소) 스키마."""

from pydantic import BaseModel, ConfigDict, Field

from wayfarer.core.geo import Coordinate
from wayfarer.schemas.enums import AttractionCategory


class Attraction(BaseModel):
    """외부 검색 협력자가 만들어 전달하는 명소 정보.

    일정 생성 중에는 변경되지 않으며, 생성 엔진은 참조를 선택하고 정렬할 뿐입니다.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="명소 고유 ID")
    name: str = Field(..., description="표시 이름")
    category: AttractionCategory = Field(..., description="선호 태그와 같은 어휘의 명소 분류")
    description: str | None = Field(default=None, description="명소 한 줄 설명")
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="위도")
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="경도")
    estimated_duration: int = Field(..., gt=0, description="예상 체류 시간 (분)")
    rating: float = Field(default=0.0, allow_inf_nan=False, description="평점 (참고용, 척도 제한 없음)")
    address: str = Field(default="", description="주소 (참고용)")
    image_url: str | None = Field(default=None, description="대표 이미지 URL")

    @property
    def location(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)
