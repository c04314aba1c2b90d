import json
import httpx
from typing import Any, Dict, Optional
from models.api_response import ApiResponse
from core.config import settings
from core.logger import get_logger

logger = get_logger(__name__)


def error_message(payload: Any, status_code: int) -> str:
    """Pick the upstream error text; Airtable nests it as {"error": {"message": ...}}."""
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        error = error.get("message") or error.get("type")
    return str(error) if error else f"API Error: {status_code}"


async def global_fetch(
        url: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None
    ) -> ApiResponse:
    """
    Send a JSON request and wrap the outcome in an ApiResponse.

    Transport problems, timeouts, HTTP errors and non-JSON bodies all come back
    as success=False with an error message instead of raising. status_code is
    set whenever the server answered.
    """
    request_headers = {"Content-Type": "application/json", **(headers or {})}
    content = json.dumps(body) if body is not None else None

    logger.info(f"Fetching: {method} {url} (body size: {len(content) if content else 0})")

    try:
        if client is not None:
            response = await client.request(method, url, headers=request_headers, content=content, timeout=timeout or settings.HTTP_TIMEOUT_SECONDS)
        else:
            async with httpx.AsyncClient(timeout=timeout or settings.HTTP_TIMEOUT_SECONDS) as owned_client:
                response = await owned_client.request(method, url, headers=request_headers, content=content)
    except httpx.TimeoutException:
        logger.error(f"Request timeout: {method} {url}")
        return ApiResponse(success=False, error="Request timeout")
    except httpx.HTTPError as e:
        logger.error(f"Fetch error: {method} {url}: {e}")
        return ApiResponse(success=False, error=str(e) or e.__class__.__name__)

    try:
        data = response.json()
    except ValueError:
        logger.error(f"Failed to parse response as JSON: {response.text[:500]}")
        return ApiResponse(
            success=False,
            error=f"Invalid JSON response: {response.text[:100]}...",
            status_code=response.status_code
        )

    if not response.is_success:
        logger.error(f"API error {response.status_code}: {data}")
        return ApiResponse(
            success=False,
            data=data,
            error=error_message(data, response.status_code),
            status_code=response.status_code
        )

    return ApiResponse(success=True, data=data, status_code=response.status_code)
