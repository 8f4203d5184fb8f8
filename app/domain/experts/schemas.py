"""Expert domain schemas"""

from typing import Optional

from pydantic import BaseModel


class ExpertResponse(BaseModel):
    id: str
    username: str
    fullname: Optional[str] = None
    expertise: Optional[str] = None

    class Config:
        from_attributes = True
