from types import MappingProxyType
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from typing import Dict, Mapping, Tuple

# Stored for every element when the answer had no usable numbered sections
UNPARSEABLE_RESPONSE = "AI was unable to generate a response for this element."

class ParsedRfp(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    elements: Tuple[str, ...] = Field(default_factory=tuple, description="Extracted requirements/questions, in answer order")
    responses: Mapping[int, str] = Field(default_factory=dict, validate_default=True, description="Zero-based element index to generated response")
    raw_response: str = Field("", alias="rawResponse", description="The assistant answer, verbatim")

    @field_validator("responses", mode="after")
    @classmethod
    def read_only_responses(cls, value: Mapping[int, str]) -> Mapping[int, str]:
        return MappingProxyType(dict(value))

    @field_serializer("responses")
    def dump_responses(self, value: Mapping[int, str]) -> Dict[int, str]:
        return dict(value)
