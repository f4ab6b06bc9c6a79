"""명소 카테고리 열거형."""

from enum import StrEnum


class AttractionCategory(StrEnum):
    """여행 선호 태그이자 명소 분류 값. 문자열 값이 정확히 일치해야 선호 필터가 동작합니다."""

    PARKS_NATURE = "Parks & Nature"
    MUSEUMS_GALLERIES = "Museums & Galleries"
    HISTORICAL_SITES = "Historical Sites"
    SHOPPING_DISTRICTS = "Shopping Districts"
    RESTAURANTS_FOODIE = "Restaurants & Foodie Spots"
    NIGHTLIFE = "Nightlife"
    FAMILY_FRIENDLY = "Family-Friendly"
    ADVENTURE_OUTDOORS = "Adventure & Outdoors"
    ART_CULTURE = "Art & Culture"
