from typing import Any, Callable, Dict, List, Optional
from models.alltius_answer import AlltiusAnswer
from models.assistant import AssistantProfile, AssistantVersion
from models.parsed_rfp import ParsedRfp
from models.records import ResponseStatus, Rfp, SavedResponse
from services.alltius_service import AlltiusService
from services.airtable_service import AirtableService
from services.assistant_registry import get_assistant_profile
from services.rfp_parser import parse_ai_response
from prompts.core_prompts import build_rfp_parse_prompt
from core.errors import EmptyAnswerError, InvalidInputError
from core.logger import get_logger

logger = get_logger(__name__)

AlltiusFactory = Callable[[Optional[str]], AlltiusService]
AirtableFactory = Callable[[Optional[AssistantProfile]], AirtableService]


def default_alltius_factory(assistant_id: Optional[str] = None) -> AlltiusService:
    return AlltiusService(assistant_id=assistant_id)


def default_airtable_factory(profile: Optional[AssistantProfile] = None) -> AirtableService:
    # Without a profile, use the table configured through AIRTABLE_* settings
    if profile is None:
        return AirtableService()
    return AirtableService(base_id=profile.airtable_base_id, table_name=profile.airtable_table_name)


class RfpService:
    def __init__(
            self,
            alltius_factory: Optional[AlltiusFactory] = None,
            airtable_factory: Optional[AirtableFactory] = None
        ):
        self.alltius_factory = alltius_factory or default_alltius_factory
        self.airtable_factory = airtable_factory or default_airtable_factory

    async def generate_response(
            self,
            prompt: Optional[str],
            chat_session: Optional[str] = None,
            user_identifier: Optional[str] = None,
            assistant_id: Optional[str] = None
        ) -> AlltiusAnswer:
        if not prompt or not prompt.strip():
            raise InvalidInputError("Missing prompt in request body")

        return await self.alltius_factory(assistant_id).chat(prompt, chat_session, user_identifier)

    async def get_analysis(self, question: Optional[str]) -> Dict[str, Any]:
        """Ask the default assistant a single question; the whole answer is one element."""
        if not question or not question.strip():
            raise InvalidInputError("Missing rfpTitle in request body")

        answer = await self.alltius_factory(None).chat(question, source="epi_rfp_tool")

        return {
            "elements": [answer.response],
            "id": answer.id,
            "intent_type": answer.intent_type
        }

    async def parse_rfp(self, rfp_text: Optional[str], version: str = AssistantVersion.RFP) -> ParsedRfp:
        """
        Send RFP text to the version's assistant and split its answer into
        extracted elements and their responses.

        - Reject blank RFP text before calling out.
        - Wrap the text in the two-section answer format prompt.
        - Parse the answer, falling back to one element per line when the
          assistant ignored the format.
        - Raise EmptyAnswerError when the answer has no non-blank line at all.
        """
        if not rfp_text or not rfp_text.strip():
            raise InvalidInputError("No RFP text provided")

        profile = get_assistant_profile(version)
        prompt = build_rfp_parse_prompt(rfp_text)

        logger.info(f"Parsing RFP with {profile.version} assistant ({len(rfp_text)} characters)")
        answer = await self.alltius_factory(profile.assistant_id).chat(prompt, source=profile.source)

        parsed = parse_ai_response(answer.response)
        if not parsed.elements:
            raise EmptyAnswerError("AI assistant returned nothing usable", details=answer.response)

        logger.info(f"Parsed RFP into {len(parsed.elements)} elements")
        return parsed

    async def save_response(self, element: Optional[str], response: Optional[str], version: str = AssistantVersion.RFP) -> Dict[str, Any]:
        if not element or not response:
            raise InvalidInputError("Missing required fields")

        profile = get_assistant_profile(version)
        fields = {
            profile.element_field: element,
            profile.response_field: response
        }

        logger.info(f"Saving {profile.version} response to Airtable table {profile.airtable_table_name}")
        return await self.airtable_factory(profile).create_record(fields)

    async def fetch_saved_responses(self, version: str = AssistantVersion.RFP) -> List[SavedResponse]:
        profile = get_assistant_profile(version)
        records = await self.airtable_factory(profile).list_records()

        saved = [self.to_saved_response(record, profile) for record in records]
        logger.info(f"Fetched {len(saved)} saved {profile.version} responses")
        return saved

    @staticmethod
    def to_saved_response(record: Dict[str, Any], profile: AssistantProfile) -> SavedResponse:
        fields = record.get("fields", {})

        if profile.question_field:
            return SavedResponse(
                id=record["id"],
                question=fields.get(profile.question_field, ""),
                response=fields.get(profile.response_field, ""),
                created_time=record.get("createdTime")
            )

        return SavedResponse(
            id=record["id"],
            element=fields.get(profile.element_field, ""),
            response=fields.get(profile.response_field, ""),
            created_time=record.get("createdTime"),
            status=ResponseStatus.PENDING
        )

    async def fetch_rfps(self) -> List[Rfp]:
        records = await self.airtable_factory(None).list_records()

        rfps = []
        for record in records:
            fields = record.get("fields", {})
            rfps.append(Rfp(
                id=record["id"],
                rfp_title=fields.get("rfp_title") or "No Title",
                requesting_company=fields.get("requesting_company") or "Unknown Company",
                rfp_text=fields.get("rfp_text") or "No Text Available",
                rfp_elements=fields.get("rfp_elements") or "",
                response=fields.get("response") or "",
                status=fields.get("status") or ResponseStatus.PENDING,
                created_at=fields.get("created_at") or record.get("createdTime")
            ))

        return rfps

    async def update_response(self, record_id: Optional[str], response_text: Optional[str], status: Optional[str]) -> Dict[str, Any]:
        if not record_id or not response_text or not status:
            raise InvalidInputError("Missing required fields: id, responseText, status")

        try:
            status = ResponseStatus(status)
        except ValueError:
            raise InvalidInputError(f"Invalid status: {status}")

        logger.info(f"Updating Airtable record {record_id} (status: {status})")
        return await self.airtable_factory(None).update_record(
            record_id,
            {"response": response_text, "status": status.value}
        )
