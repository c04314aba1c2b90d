from typing_extensions import Annotated
from fastapi import APIRouter, Depends
from models.assistant import AssistantVersion
from models.request_models import SaveResponseRequest, UpdateResponseRequest
from services.rfp_service import RfpService
from services.service_registry import get_rfp_service
from core.errors import AskTacitError, to_http_exception
from core.logger import get_logger

router = APIRouter()

logger = get_logger(__name__)

RfpServiceDep = Annotated[RfpService, Depends(get_rfp_service)]

@router.post("/save-to-airtable")
async def save_to_airtable(request: SaveResponseRequest, service: RfpServiceDep):
    try:
        record = await service.save_response(request.element, request.response, request.version)
    except AskTacitError as e:
        logger.error(f"Error saving to Airtable: {e.message}")
        raise to_http_exception(e)

    return {"success": True, "record": record}

@router.get("/fetch-saved-responses")
async def fetch_saved_responses(service: RfpServiceDep, version: str = AssistantVersion.RFP.value):
    try:
        saved = await service.fetch_saved_responses(version)
    except AskTacitError as e:
        logger.error(f"Error fetching saved responses: {e.message}")
        raise to_http_exception(e)

    return {
        "success": True,
        "records": [item.model_dump(by_alias=True, exclude_none=True) for item in saved]
    }

@router.get("/fetch-rfps")
async def fetch_rfps(service: RfpServiceDep):
    try:
        logger.info("Fetching RFPs from Airtable...")
        rfps = await service.fetch_rfps()
    except AskTacitError as e:
        logger.error(f"Airtable fetch error: {e.message}")
        raise to_http_exception(e)

    if not rfps:
        logger.warning("No RFP records found in Airtable.")
        return {"message": "No RFPs available."}

    return [rfp.model_dump() for rfp in rfps]

@router.post("/update-response")
async def update_response(request: UpdateResponseRequest, service: RfpServiceDep):
    try:
        data = await service.update_response(request.id, request.response_text, request.status)
    except AskTacitError as e:
        logger.error(f"Airtable update error: {e.message}")
        raise to_http_exception(e)

    return {"message": "Response updated successfully", "data": data}
