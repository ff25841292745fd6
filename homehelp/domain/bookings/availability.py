"""
Availability checker.

A provider's free slots for a day are the daily slot template minus every
time-of-day already held by one of the provider's non-cancelled bookings on
that day. Bookings are points in time: only an exact HH:MM match removes a
slot, there is no duration or overlap handling.

This is a read-side filter only. Nothing is reserved, so two users can still
both see and try to book the same slot; the booking service re-checks at
write time when ENFORCE_SLOT_AVAILABILITY is on.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ...config import SLOT_TEMPLATE
from ...models import Booking
from ...shared.validators import validate_slot
from .repository import BookingRepository

logger = logging.getLogger(__name__)


def parse_slot_template(raw: str) -> list[str]:
    """Parse a comma separated HH:MM list into sorted, de-duplicated slots"""
    slots = {validate_slot(part) for part in raw.split(",") if part.strip()}
    return sorted(slots)


DEFAULT_SLOTS = parse_slot_template(SLOT_TEMPLATE)


def is_slot_taken(bookings: Iterable[Booking], target_date: date, slot: str) -> bool:
    for booking in bookings:
        if booking.status == "cancelled":
            continue
        when = booking.appointment_date
        if when.date() == target_date and when.strftime("%H:%M") == slot:
            return True
    return False


def filter_available_slots(
    bookings: Iterable[Booking], target_date: date, slots: Iterable[str]
) -> list[str]:
    """Slots (in template order) not taken by any of the given bookings on target_date"""
    bookings = list(bookings)
    return [slot for slot in slots if not is_slot_taken(bookings, target_date, slot)]


def get_available_slots(
    db: Session, provider_id: int, target_date: date, slots: Optional[list[str]] = None
) -> list[str]:
    """Free slots of a provider on target_date"""
    template = DEFAULT_SLOTS if slots is None else [validate_slot(s) for s in slots]
    bookings = BookingRepository.get_bookings_by_provider_on_day(db, provider_id, target_date)
    available = filter_available_slots(bookings, target_date, template)
    logger.debug(
        f"Provider {provider_id} on {target_date}: {len(available)}/{len(template)} slots free"
    )
    return available
