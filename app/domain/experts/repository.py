"""Expert repository - Read-only access to the expert directory"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Expert


class ExpertRepository:
    """Repository for expert lookups"""

    def __init__(self, db: Session):
        self.db = db

    def get_experts(self) -> list[Expert]:
        return self.db.query(Expert).order_by(Expert.username).all()

    def get_expert_by_id(self, expert_id: str) -> Optional[Expert]:
        return self.db.get(Expert, expert_id)

    def get_experts_by_ids(self, expert_ids: set[str]) -> dict[str, Expert]:
        """Fetch several experts at once, keyed by ID"""
        if not expert_ids:
            return {}
        experts = self.db.query(Expert).filter(Expert.id.in_(expert_ids)).all()
        return {e.id: e for e in experts}
