from typing_extensions import Annotated
from fastapi import APIRouter, Depends, HTTPException
from models.request_models import AnalysisRequest, ExportRequest, GenerateResponseRequest, ParseRfpRequest
from services.rfp_service import RfpService
from services.service_registry import get_rfp_service
from services.export_service import generate_export_html
from core.errors import AskTacitError, to_http_exception
from core.logger import get_logger

router = APIRouter()

logger = get_logger(__name__)

RfpServiceDep = Annotated[RfpService, Depends(get_rfp_service)]

@router.post("/alltius-generate-response")
async def generate_response(request: GenerateResponseRequest, service: RfpServiceDep):
    try:
        answer = await service.generate_response(
            request.prompt,
            request.chat_session,
            request.user_identifier,
            request.assistant_id
        )
    except AskTacitError as e:
        logger.error(f"Generate response failed: {e.message}")
        raise to_http_exception(e)

    return {"success": True, **answer.model_dump()}

@router.post("/alltius-get-analysis")
async def get_analysis(request: AnalysisRequest, service: RfpServiceDep):
    try:
        logger.info(f"Received analysis request: {request.rfp_title}")
        analysis = await service.get_analysis(request.rfp_title)
    except AskTacitError as e:
        logger.error(f"Analysis failed: {e.message}")
        raise to_http_exception(e)

    return {"success": True, **analysis}

@router.post("/rfp/parse")
async def parse_rfp(request: ParseRfpRequest, service: RfpServiceDep):
    try:
        parsed = await service.parse_rfp(request.rfp_text, request.version)
    except AskTacitError as e:
        logger.error(f"Error parsing RFP with AI: {e.message}")
        raise to_http_exception(e)

    return {"success": True, **parsed.model_dump(by_alias=True)}

@router.post("/export-to-pdf")
async def export_to_pdf(request: ExportRequest):
    if request.elements is None or request.responses is None or not request.rfp_title:
        raise HTTPException(
            status_code=400,
            detail={"error": "Missing required fields: elements, responses, or rfpTitle"}
        )

    logger.info(f"Exporting {len(request.elements)} elements for '{request.rfp_title}'")
    html_content = generate_export_html(request.rfp_title, request.elements, request.responses)

    return {"success": True, "htmlContent": html_content}
