"""Expert router - Read endpoints for the expert directory"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.exceptions import NotFoundError
from .repository import ExpertRepository
from .schemas import ExpertResponse

router = APIRouter(tags=["Experts"])


def get_expert_repository(db: Session = Depends(get_db)) -> ExpertRepository:
    """Dependency injection for ExpertRepository"""
    return ExpertRepository(db)


@router.get("/experts", response_model=list[ExpertResponse])
def get_experts(repo: ExpertRepository = Depends(get_expert_repository)):
    """Get all experts"""
    return [ExpertResponse.model_validate(e) for e in repo.get_experts()]


@router.get("/expert/{expert_id}", response_model=ExpertResponse)
def get_expert(expert_id: str, repo: ExpertRepository = Depends(get_expert_repository)):
    """Get an expert by ID"""
    expert = repo.get_expert_by_id(expert_id)
    if not expert:
        raise NotFoundError("Expert not found", code="expert_not_found")
    return ExpertResponse.model_validate(expert)
