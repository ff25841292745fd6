"""Booking router - FastAPI endpoints for bookings and provider availability"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ...auth import get_current_user_id
from ...database import get_db
from .availability import get_available_slots
from .schemas import AvailabilityResponse, BookingCreate, BookingOverviewResponse, BookingResponse
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


# ============================================================================
# USER BOOKINGS
# ============================================================================


@router.get("/bookings", response_model=list[BookingResponse])
async def list_bookings(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """List the current user's bookings"""
    return [BookingResponse.from_booking(b) for b in service.get_bookings_for_user(user_id)]


@router.get("/bookings/overview", response_model=BookingOverviewResponse)
async def bookings_overview(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """The current user's bookings split into upcoming and past"""
    upcoming, past = service.get_overview(user_id)
    return BookingOverviewResponse(
        upcoming=[BookingResponse.from_booking(b) for b in upcoming],
        past=[BookingResponse.from_booking(b) for b in past],
    )


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Get one of the current user's bookings"""
    return BookingResponse.from_booking(service.get_booking(booking_id, user_id))


@router.post("/bookings", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Book a provider for a service at a date and time"""
    return BookingResponse.from_booking(service.create_booking(data, user_id))


@router.delete("/bookings/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_booking(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Cancel one of the current user's bookings"""
    service.cancel_booking(booking_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# PROVIDER SCHEDULE
# ============================================================================


@router.get("/providers/{provider_id}/bookings", response_model=list[BookingResponse])
async def list_provider_bookings(
    provider_id: int,
    service: BookingService = Depends(get_booking_service),
):
    """List a provider's bookings (used to grey out taken slots)"""
    return [BookingResponse.from_booking(b) for b in service.get_bookings_for_provider(provider_id)]


@router.get("/providers/{provider_id}/availability", response_model=AvailabilityResponse)
async def provider_availability(
    provider_id: int,
    target_date: date = Query(..., alias="date", description="Calendar day, YYYY-MM-DD"),
    db: Session = Depends(get_db),
):
    """Free time slots of a provider on a given day"""
    slots = get_available_slots(db, provider_id, target_date)
    return AvailabilityResponse(providerId=provider_id, date=target_date, slots=slots)
