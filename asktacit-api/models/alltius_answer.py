from pydantic import BaseModel, Field
from typing import Optional

class AlltiusAnswer(BaseModel):
    response: str = Field(..., description="Answer text returned by the assistant")
    id: Optional[str | int] = Field(None, description="Alltius post identifier")
    intent_type: Optional[str] = Field(None, description="Intent detected by Alltius")
