from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.domain.events.event_status import EventStatus, EventStatusValue
from app.schemas.event import EventDescriptor
from app.utils.time_utils import fixed_clock

ONE_MS = timedelta(milliseconds=1)
ONE_HOUR = timedelta(hours=1)


def make_event(end_date, review_duration_in_hours=1):
    return EventDescriptor(end_date=end_date, review_duration_in_hours=review_duration_in_hours)


def test_no_event_is_done(clock):
    assert EventStatus.from_event(None, clock=clock).value == EventStatusValue.DONE


def test_no_event_does_not_read_clock():
    def exploding_clock():
        raise AssertionError("clock must not be read")

    assert EventStatus.from_event(None, clock=exploding_clock).value == EventStatusValue.DONE


@pytest.mark.parametrize(
    "offset, expected",
    [
        (ONE_MS, EventStatusValue.ACTIVE),
        (timedelta(0), EventStatusValue.ACTIVE),
        (-ONE_MS, EventStatusValue.IN_REVIEW),
        (-ONE_HOUR + ONE_MS, EventStatusValue.IN_REVIEW),
        (-ONE_HOUR, EventStatusValue.IN_REVIEW),
        (-ONE_HOUR - ONE_MS, EventStatusValue.DONE),
    ],
)
def test_status_around_boundaries(now, clock, offset, expected):
    event = make_event(now + offset, review_duration_in_hours=1)

    assert EventStatus.from_event(event, clock=clock).value == expected


def test_fractional_review_duration(now, clock):
    event = make_event(now - timedelta(minutes=20), review_duration_in_hours=0.5)

    assert EventStatus.from_event(event, clock=clock).value == EventStatusValue.IN_REVIEW


def test_zero_review_duration_skips_review(now, clock):
    assert EventStatus.from_event(make_event(now, 0), clock=clock).value == EventStatusValue.ACTIVE
    assert EventStatus.from_event(make_event(now - ONE_MS, 0), clock=clock).value == EventStatusValue.DONE


def test_negative_review_duration_is_accepted(now, clock):
    event = make_event(now - ONE_MS, review_duration_in_hours=-5)

    assert EventStatus.from_event(event, clock=clock).value == EventStatusValue.DONE


def test_naive_datetimes_are_treated_as_utc(now):
    naive_now = now.replace(tzinfo=None)
    event = make_event(naive_now - ONE_MS)

    status = EventStatus.from_event(event, clock=fixed_clock(naive_now))

    assert status.value == EventStatusValue.IN_REVIEW


def test_other_timezones_compare_by_instant(now, clock):
    bangkok = timezone(timedelta(hours=7))
    event = make_event(now.astimezone(bangkok))

    assert EventStatus.from_event(event, clock=clock).value == EventStatusValue.ACTIVE


def test_clock_is_read_once(now):
    calls = []

    def counting_clock():
        calls.append(1)
        return now

    EventStatus.from_event(make_event(now - 2 * ONE_HOUR), clock=counting_clock)

    assert len(calls) == 1


def test_status_is_immutable(clock):
    status = EventStatus.from_event(None, clock=clock)

    with pytest.raises(AttributeError):
        status.value = EventStatusValue.ACTIVE


def test_status_values_match_wire_names():
    assert [v.value for v in EventStatusValue] == ["active", "inReview", "done"]
    assert EventStatusValue.IN_REVIEW == "inReview"


def test_default_clock_uses_wall_time():
    far_future = datetime.now(timezone.utc) + timedelta(days=365)

    assert EventStatus.from_event(make_event(far_future)).value == EventStatusValue.ACTIVE


@pytest.mark.parametrize(
    "review_duration_in_hours, expected",
    [
        (1e8, EventStatusValue.IN_REVIEW),
        (1e13, EventStatusValue.IN_REVIEW),
        (-1e8, EventStatusValue.DONE),
        (-1e13, EventStatusValue.DONE),
    ],
)
def test_review_deadline_out_of_datetime_range(now, clock, review_duration_in_hours, expected):
    event = make_event(now - ONE_HOUR, review_duration_in_hours=review_duration_in_hours)

    assert EventStatus.from_event(event, clock=clock).value == expected


@pytest.mark.parametrize("review_duration_in_hours", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_review_duration_is_rejected(now, review_duration_in_hours):
    with pytest.raises(ValidationError):
        make_event(now - ONE_HOUR, review_duration_in_hours=review_duration_in_hours)
