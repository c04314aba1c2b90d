from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

class GenerateResponseRequest(CamelModel):
    prompt: Optional[str] = None
    chat_session: Optional[str] = Field(None, alias="chatSession")
    user_identifier: Optional[str] = Field(None, alias="userIdentifier")
    assistant_id: Optional[str] = Field(None, alias="assistantId")

class AnalysisRequest(CamelModel):
    rfp_title: Optional[str] = Field(None, alias="rfpTitle")

class ParseRfpRequest(CamelModel):
    rfp_text: Optional[str] = Field(None, alias="rfpText")
    version: str = "versionRFP"

class SaveResponseRequest(CamelModel):
    element: Optional[str] = None
    response: Optional[str] = None
    version: str = "versionRFP"

class UpdateResponseRequest(CamelModel):
    id: Optional[str] = None
    response_text: Optional[str] = Field(None, alias="responseText")
    status: Optional[str] = None

class ExportRequest(CamelModel):
    elements: Optional[List[str]] = None
    responses: Optional[Dict[int, str]] = None
    rfp_title: Optional[str] = Field(None, alias="rfpTitle")
