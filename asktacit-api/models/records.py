from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional
from enum import StrEnum

class ResponseStatus(StrEnum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

# Airtable cells can hold lists, numbers or linked records, so field values pass through untyped
class Rfp(BaseModel):
    id: str
    rfp_title: Any = "No Title"
    requesting_company: Any = "Unknown Company"
    rfp_text: Any = "No Text Available"
    rfp_elements: Any = ""
    response: Any = ""
    status: Any = ResponseStatus.PENDING.value
    created_at: Optional[Any] = None

class SavedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    question: Any = ""
    element: Optional[Any] = None
    response: Any = ""
    created_time: Optional[str] = Field(None, alias="createdTime")
    status: Optional[ResponseStatus] = None
