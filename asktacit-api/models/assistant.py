from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

class AssistantVersion(StrEnum):
    RFP = "versionRFP"
    CYBER = "versionCyber"

@dataclass(frozen=True)
class AssistantProfile:
    version: AssistantVersion
    assistant_id: str
    airtable_base_id: str
    airtable_table_name: str
    element_field: str
    response_field: str
    source: str
    # RFP tables only store the element, not the original question
    question_field: Optional[str] = None
