"""Rescheduling router - FastAPI endpoints for reschedule requests"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ..bookings.schemas import BookingResponse
from .projections import ReschedulingProjections
from .schemas import (
    AdminRescheduleRequestList,
    DecisionResponse,
    ExpertRescheduleRequestList,
    MessageResponse,
    RescheduleCreate,
    RescheduleDecisionRequest,
    RescheduleRequestList,
)
from .service import ACCEPTED, ReschedulingService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Rescheduling"])

LIST_MESSAGE = "Rescheduling requests retrieved successfully"


def get_rescheduling_service(db: Session = Depends(get_db)) -> ReschedulingService:
    """Dependency injection for ReschedulingService"""
    return ReschedulingService(db)


def get_rescheduling_projections(db: Session = Depends(get_db)) -> ReschedulingProjections:
    return ReschedulingProjections(db)


# ============================================================================
# WORKFLOW
# ============================================================================


@router.post("/reschedule", status_code=201, response_model=MessageResponse)
def create_reschedule_request(
    data: RescheduleCreate,
    service: ReschedulingService = Depends(get_rescheduling_service),
):
    """Submit a reschedule request for a booking"""
    service.submit(data.currentBookingId, data.requestedDateId, data.requestedSlotId)
    return MessageResponse(message="Rescheduling request created successfully")


@router.post(
    "/handle-Reschedule", response_model=DecisionResponse, response_model_exclude_none=True
)
def handle_reschedule(
    data: RescheduleDecisionRequest,
    service: ReschedulingService = Depends(get_rescheduling_service),
):
    """Accept or reject the pending reschedule request of a booking"""
    decision = service.decide(
        data.currentBookingId,
        data.action,
        requested_date_id=data.requestedDateId,
        requested_slot_id=data.requestedSlotId,
    )
    if decision.action == ACCEPTED:
        return DecisionResponse(
            message="Reschedule request accepted successfully",
            booking=BookingResponse.from_booking(decision.booking),
        )
    return DecisionResponse(message="Reschedule request rejected successfully")


# ============================================================================
# LISTS
# ============================================================================


@router.get("/reschedule-request", response_model=RescheduleRequestList)
def list_reschedule_requests(
    projections: ReschedulingProjections = Depends(get_rescheduling_projections),
):
    """List all reschedule requests without enrichment"""
    return {"message": LIST_MESSAGE, "list": projections.plain_list()}


@router.get("/reschedule-requests/{expert_id}", response_model=ExpertRescheduleRequestList)
def list_expert_reschedule_requests(
    expert_id: str,
    projections: ReschedulingProjections = Depends(get_rescheduling_projections),
):
    """List reschedule requests for bookings of one expert"""
    logger.info(f"Listing reschedule requests for expert {expert_id}")
    return {"message": LIST_MESSAGE, "list": projections.by_expert(expert_id)}


@router.get("/reschedule-requests", response_model=AdminRescheduleRequestList)
@router.get("/admin/rescheduleRequests", response_model=AdminRescheduleRequestList)
def list_admin_reschedule_requests(
    projections: ReschedulingProjections = Depends(get_rescheduling_projections),
):
    """List all reschedule requests with booking, expert, date and slot details (admin)"""
    return {"message": LIST_MESSAGE, "list": projections.admin_list()}
