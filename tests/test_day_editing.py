"""하루 일정 편집 및 요약 통계 테스트."""

from datetime import date

import pytest

from tests.mocks.mock_catalog import make_attraction
from wayfarer.planning.itinerary import (
    add_attraction,
    build_day_plan,
    move_attraction,
    remove_attraction,
    summarize_itinerary,
)
from wayfarer.planning.travel_time import travel_minutes

DAY = date(2024, 5, 1)


def _day():
    return build_day_plan(
        DAY,
        [
            make_attraction("a", 0.0, 0.0, duration=60, rating=4.0),
            make_attraction("b", 0.0, 0.01, duration=90, rating=5.0),
            make_attraction("c", 0.0, 0.03, duration=30, rating=3.0),
        ],
    )


def test_build_day_plan_keeps_order_and_totals() -> None:
    day = _day()
    a, b, c = day.attractions

    assert [x.id for x in day.attractions] == ["a", "b", "c"]
    assert day.estimated_travel_time == travel_minutes(a, b) + travel_minutes(b, c)
    assert day.total_duration == 180 + day.estimated_travel_time


def test_build_day_plan_for_empty_day() -> None:
    day = build_day_plan(DAY, [])

    assert day.attractions == []
    assert day.estimated_travel_time == 0
    assert day.total_duration == 0


def test_move_attraction_recomputes_totals() -> None:
    day = _day()

    moved = move_attraction(day, 2, 0)

    assert [x.id for x in moved.attractions] == ["c", "a", "b"]
    assert moved.total_duration == 180 + moved.estimated_travel_time
    assert moved.estimated_travel_time == build_day_plan(DAY, moved.attractions).estimated_travel_time
    assert [x.id for x in day.attractions] == ["a", "b", "c"]


def test_remove_attraction_recomputes_totals() -> None:
    removed = remove_attraction(_day(), 1)

    assert [x.id for x in removed.attractions] == ["a", "c"]
    assert removed.estimated_travel_time == travel_minutes(removed.attractions[0], removed.attractions[1])
    assert removed.total_duration == 90 + removed.estimated_travel_time


def test_add_attraction_appends_and_recomputes() -> None:
    extra = make_attraction("d", 0.0, 0.05, duration=45)

    added = add_attraction(_day(), extra)

    assert [x.id for x in added.attractions] == ["a", "b", "c", "d"]
    assert added.total_duration == 225 + added.estimated_travel_time


@pytest.mark.parametrize(("source", "dest"), [(3, 0), (0, 3), (-1, 0)])
def test_move_attraction_rejects_bad_indexes(source: int, dest: int) -> None:
    with pytest.raises(IndexError):
        move_attraction(_day(), source, dest)


def test_remove_attraction_rejects_bad_index() -> None:
    with pytest.raises(IndexError):
        remove_attraction(_day(), 5)


def test_summarize_itinerary() -> None:
    first = _day()
    second = build_day_plan(date(2024, 5, 2), [make_attraction("e", 1.0, 1.0, duration=120, rating=4.0)])

    stats = summarize_itinerary([first, second])

    assert stats.total_attractions == 4
    assert stats.total_duration == first.total_duration + 120
    assert stats.total_travel_time == first.estimated_travel_time
    assert stats.average_rating == pytest.approx(4.0)


def test_summarize_empty_itinerary() -> None:
    stats = summarize_itinerary([build_day_plan(DAY, [])])

    assert stats.total_attractions == 0
    assert stats.average_rating == 0.0


def test_summarize_accepts_ratings_on_any_scale() -> None:
    day = build_day_plan(
        DAY,
        [make_attraction("ten-point", 0.0, 0.0, rating=9.2), make_attraction("percent", 0.0, 0.01, rating=87.0)],
    )

    assert summarize_itinerary([day]).average_rating == pytest.approx(48.1)
