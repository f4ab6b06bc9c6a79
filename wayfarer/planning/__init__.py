"""여행 일정 생성 엔진 모음."""

from wayfarer.planning.clustering import cluster_attractions
from wayfarer.planning.itinerary import build_day_plan, build_itinerary
from wayfarer.planning.optimizer import reoptimize_route
from wayfarer.planning.routing import order_route

__all__ = ["build_itinerary", "build_day_plan", "cluster_attractions", "order_route", "reoptimize_route"]
