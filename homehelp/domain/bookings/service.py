"""Booking service - Business logic for the booking lifecycle"""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from sqlalchemy.orm import Session

from ...config import ENFORCE_SLOT_AVAILABILITY, REQUIRE_FUTURE_BOOKINGS
from ...errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ...models import Booking
from ...shared.timeutils import utc_now
from .repository import BookingRepository
from .schemas import BookingCreate

logger = logging.getLogger(__name__)


def partition_bookings(
    bookings: Iterable[Booking], now: datetime
) -> tuple[list[Booking], list[Booking]]:
    """
    Split bookings into (upcoming, past) around now.

    Upcoming holds appointments at or after now, soonest first. Past holds
    appointments before now, most recent first.
    """
    upcoming = []
    past = []
    for booking in bookings:
        if booking.appointment_date >= now:
            upcoming.append(booking)
        else:
            past.append(booking)

    upcoming.sort(key=lambda b: (b.appointment_date, b.id))
    past.sort(key=lambda b: (b.appointment_date, b.id), reverse=True)
    return upcoming, past


class BookingService:
    """Service layer for creating, cancelling and listing bookings"""

    def __init__(
        self,
        db: Session,
        enforce_slot_availability: bool = ENFORCE_SLOT_AVAILABILITY,
        require_future_bookings: bool = REQUIRE_FUTURE_BOOKINGS,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.db = db
        self.repo = BookingRepository()
        self.enforce_slot_availability = enforce_slot_availability
        self.require_future_bookings = require_future_bookings
        self.clock = clock

    def create_booking(self, data: BookingCreate, user_id: int) -> Booking:
        """Create a scheduled booking for user_id"""
        logger.info(
            f"📥 Creating booking for user_id: {user_id} "
            f"(provider {data.providerId}, {data.appointmentDate.isoformat()})"
        )

        if self.require_future_bookings and data.appointmentDate < self.clock():
            raise ValidationError("Appointment date must be in the future")

        if self.enforce_slot_availability:
            existing = self.repo.find_scheduled_booking(
                self.db, data.providerId, data.appointmentDate
            )
            if existing:
                logger.warning(
                    f"⚠️ Slot {data.appointmentDate.isoformat()} for provider {data.providerId} "
                    f"already held by booking {existing.id}"
                )
                raise ConflictError("This time slot is no longer available")

        booking = self.repo.create_booking(
            self.db,
            user_id,
            service_id=data.serviceId,
            provider_id=data.providerId,
            appointment_date=data.appointmentDate,
            notes=data.notes,
        )
        logger.info(f"✅ Booking {booking.id} scheduled for user {user_id}")
        return booking

    def get_booking(self, booking_id: int, user_id: int) -> Booking:
        """Get a booking owned by user_id"""
        booking = self.repo.get_booking(self.db, booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        if booking.user_id != user_id:
            raise ForbiddenError("You do not have access to this booking")
        return booking

    def cancel_booking(self, booking_id: int, user_id: int) -> None:
        """Cancel (hard-delete) a booking; only its owner may do this"""
        booking = self.repo.get_booking(self.db, booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        if booking.user_id != user_id:
            logger.warning(f"⚠️ User {user_id} attempted to cancel booking {booking_id} owned by another user")
            raise ForbiddenError("You can only cancel your own bookings")

        self.repo.delete_booking(self.db, booking)
        logger.info(f"✅ Booking {booking_id} cancelled by user {user_id}")

    def get_bookings_for_user(self, user_id: int) -> list[Booking]:
        return self.repo.get_bookings_by_user(self.db, user_id)

    def get_bookings_for_provider(self, provider_id: int) -> list[Booking]:
        return self.repo.get_bookings_by_provider(self.db, provider_id)

    def get_overview(
        self, user_id: int, now: Optional[datetime] = None
    ) -> tuple[list[Booking], list[Booking]]:
        """A user's bookings as (upcoming, past), recomputed on every call"""
        bookings = self.get_bookings_for_user(user_id)
        return partition_bookings(bookings, now or self.clock())
