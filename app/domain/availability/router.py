"""Availability router - Read endpoints for dates and slots"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .repository import AvailabilityRepository
from .schemas import DateResponse

router = APIRouter(tags=["Availability"])


def get_availability_repository(db: Session = Depends(get_db)) -> AvailabilityRepository:
    """Dependency injection for AvailabilityRepository"""
    return AvailabilityRepository(db)


@router.get("/dates", response_model=list[DateResponse])
def get_dates(repo: AvailabilityRepository = Depends(get_availability_repository)):
    """Get all date entries with their slots"""
    return [DateResponse.from_date(d) for d in repo.get_dates()]


@router.get("/date/{expert_id}", response_model=list[DateResponse])
def get_expert_dates(
    expert_id: str,
    repo: AvailabilityRepository = Depends(get_availability_repository),
):
    """Get the date entries of one expert (empty list when none)"""
    return [DateResponse.from_date(d) for d in repo.get_dates(expert_id)]
