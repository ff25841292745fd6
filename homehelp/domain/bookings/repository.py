"""Booking repository - Database operations for bookings"""

from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def create_booking(db: Session, user_id: int, **booking_data) -> Booking:
        """Create a new booking; every booking starts out scheduled"""
        booking = Booking(user_id=user_id, status="scheduled", **booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_bookings_by_user(db: Session, user_id: int) -> list[Booking]:
        return (
            db.query(Booking)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.appointment_date.asc(), Booking.id.asc())
            .all()
        )

    @staticmethod
    def get_bookings_by_provider(db: Session, provider_id: int) -> list[Booking]:
        return (
            db.query(Booking)
            .filter(Booking.provider_id == provider_id)
            .order_by(Booking.appointment_date.asc(), Booking.id.asc())
            .all()
        )

    @staticmethod
    def get_bookings_by_provider_on_day(db: Session, provider_id: int, day: date) -> list[Booking]:
        """Bookings of a provider whose appointment falls on the given calendar day"""
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        return (
            db.query(Booking)
            .filter(
                Booking.provider_id == provider_id,
                Booking.appointment_date >= start,
                Booking.appointment_date < end,
            )
            .order_by(Booking.appointment_date.asc())
            .all()
        )

    @staticmethod
    def find_scheduled_booking(
        db: Session, provider_id: int, appointment_date: datetime
    ) -> Optional[Booking]:
        """Find a non-cancelled booking holding this provider at exactly this timestamp"""
        return (
            db.query(Booking)
            .filter(
                Booking.provider_id == provider_id,
                Booking.appointment_date == appointment_date,
                Booking.status != "cancelled",
            )
            .first()
        )

    @staticmethod
    def delete_booking(db: Session, booking: Booking) -> None:
        """Hard-delete a booking"""
        db.delete(booking)
        db.commit()
