from datetime import date, datetime

import pytest

from homehelp.domain.bookings.availability import (
    DEFAULT_SLOTS,
    filter_available_slots,
    get_available_slots,
    is_slot_taken,
    parse_slot_template,
)
from homehelp.domain.bookings.repository import BookingRepository
from homehelp.models import Booking

DAY = date(2024, 6, 1)


def test_default_template_is_hourly_business_day():
    assert DEFAULT_SLOTS == [f"{h:02d}:00" for h in range(8, 18)]


def test_parse_slot_template_sorts_and_dedupes():
    assert parse_slot_template("14:00, 09:30,09:30,,08:00") == ["08:00", "09:30", "14:00"]


@pytest.mark.parametrize("raw", ["9:00", "24:00", "10:60", "noon"])
def test_parse_slot_template_rejects_bad_slots(raw):
    with pytest.raises(ValueError):
        parse_slot_template(raw)


def test_cancelled_bookings_do_not_take_slots():
    cancelled = Booking(provider_id=1, appointment_date=datetime(2024, 6, 1, 10), status="cancelled")
    assert not is_slot_taken([cancelled], DAY, "10:00")


def test_only_exact_time_matches_take_a_slot():
    booking = Booking(provider_id=1, appointment_date=datetime(2024, 6, 1, 10, 30), status="scheduled")
    assert filter_available_slots([booking], DAY, ["10:00", "10:30", "11:00"]) == ["10:00", "11:00"]


def test_bookings_on_other_days_are_ignored():
    booking = Booking(provider_id=1, appointment_date=datetime(2024, 6, 2, 10), status="scheduled")
    assert filter_available_slots([booking], DAY, ["10:00"]) == ["10:00"]


def test_get_available_slots_with_custom_template(db_session):
    BookingRepository.create_booking(
        db_session, 1, service_id=1, provider_id=5, appointment_date=datetime(2024, 6, 1, 9, 30)
    )
    assert get_available_slots(db_session, 5, DAY, slots=["09:00", "09:30", "10:00"]) == ["09:00", "10:00"]


def test_get_available_slots_without_bookings(db_session):
    assert get_available_slots(db_session, 5, DAY) == DEFAULT_SLOTS
