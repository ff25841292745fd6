"""Booking domain schemas - Pydantic models for validation"""

from datetime import date as ddate
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...models import Booking
from ...shared.timeutils import to_naive_utc
from ...utils.sanitization import validate_and_sanitize_input


class BookingCreate(BaseModel):
    """Schema for creating a booking"""

    serviceId: int
    providerId: int
    appointmentDate: datetime
    notes: Optional[str] = None

    @field_validator("appointmentDate")
    @classmethod
    def normalize_appointment_date(cls, v):
        # Slots are matched on HH:MM, so seconds never distinguish two bookings
        return to_naive_utc(v).replace(second=0, microsecond=0)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        if v is None:
            return v
        return validate_and_sanitize_input(v, max_length=1000) or None


class BookingResponse(BaseModel):
    """Schema for booking response"""

    id: int
    userId: int
    serviceId: int
    providerId: int
    appointmentDate: datetime
    notes: Optional[str] = None
    status: str

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            userId=booking.user_id,
            serviceId=booking.service_id,
            providerId=booking.provider_id,
            appointmentDate=booking.appointment_date,
            notes=booking.notes,
            status=booking.status,
        )


class BookingOverviewResponse(BaseModel):
    """A user's bookings split around the current time"""

    upcoming: list[BookingResponse]
    past: list[BookingResponse]


class AvailabilityResponse(BaseModel):
    providerId: int
    date: ddate
    slots: list[str]
