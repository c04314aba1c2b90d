from models.assistant import AssistantProfile, AssistantVersion
from core.config import settings
from core.errors import InvalidInputError


def get_assistant_profile(version: str = AssistantVersion.RFP) -> AssistantProfile:
    """Resolve the Alltius assistant and Airtable table used by one assistant version."""
    try:
        version = AssistantVersion(version)
    except ValueError:
        raise InvalidInputError(f"Unknown assistant version: {version}")

    if version is AssistantVersion.CYBER:
        return AssistantProfile(
            version=version,
            assistant_id=settings.CYBER_ASSISTANT_ID,
            airtable_base_id=settings.CYBER_AIRTABLE_BASE_ID,
            airtable_table_name=settings.CYBER_AIRTABLE_TABLE_NAME,
            question_field="cyber_question",
            element_field="cyber_question",
            response_field="cyber_response",
            source="epi_cyber_tool"
        )

    return AssistantProfile(
        version=version,
        assistant_id=settings.RFP_ASSISTANT_ID,
        airtable_base_id=settings.RFP_AIRTABLE_BASE_ID,
        airtable_table_name=settings.RFP_AIRTABLE_TABLE_NAME,
        element_field="rfp_element",
        response_field="rfp_response",
        source="epi_rfp_tool"
    )
