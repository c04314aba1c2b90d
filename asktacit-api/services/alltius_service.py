import httpx
from datetime import datetime, timezone
from typing import Optional
from models.alltius_answer import AlltiusAnswer
from services.http_client import global_fetch
from core.config import settings
from core.errors import AlltiusError, ConfigurationError
from core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SOURCE = "epi_tool"

class AlltiusService:
    def __init__(self, assistant_id: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        if not settings.ALLTIUS_API_KEY:
            logger.error("Missing Alltius API key")
            raise ConfigurationError("Alltius API not properly configured")

        self.assistant_id = assistant_id or settings.ALLTIUS_ASSISTANT_ID
        if not self.assistant_id:
            logger.error("No assistant ID provided or configured")
            raise ConfigurationError("Alltius assistant ID not provided or configured")

        self.api_key = settings.ALLTIUS_API_KEY
        self.chat_url = settings.ALLTIUS_CHAT_URL
        self.client = client

    async def chat(
            self,
            prompt: str,
            chat_session: Optional[str] = None,
            user_identifier: Optional[str] = None,
            source: str = DEFAULT_SOURCE
        ) -> AlltiusAnswer:
        """
        Send one prompt to the configured Alltius assistant and return its answer.

        Raises AlltiusError carrying the upstream status for HTTP errors, and 500
        for connection failures, non-JSON bodies or answers without a response.
        """
        body = {
            "post": prompt,
            "assistant_id": self.assistant_id,
            "post_metadata": {
                "source": source,
                "timestamp": datetime.now(timezone.utc).isoformat()
            },
            "chat_session": chat_session or settings.ALLTIUS_DEFAULT_SESSION,
            "user_identifier": user_identifier or settings.ALLTIUS_DEFAULT_USER
        }

        logger.info(f"Processing request with Alltius assistant {self.assistant_id} "
                    f"(session: {body['chat_session']}, user: {body['user_identifier']}, prompt length: {len(prompt)} characters)")

        result = await global_fetch(
            self.chat_url,
            method="POST",
            body=body,
            headers={
                "accept": "application/json",
                "Authorization": self.api_key
            },
            client=self.client
        )

        if result.status_code is None:
            logger.error(f"Alltius API fetch error: {result.error}")
            raise AlltiusError("Failed to connect to Alltius API", 500, result.error)

        if result.status_code == 401:
            raise AlltiusError("Authentication Error", 401, "Failed to authenticate with Alltius API")

        if result.data is None:
            logger.error(f"Failed to parse Alltius response: {result.error}")
            raise AlltiusError("Invalid JSON response from Alltius", 500, result.error)

        if not result.success:
            raise AlltiusError(f"Alltius API Error: {result.status_code}", result.status_code, result.error)

        data = result.data
        if not isinstance(data, dict) or not data.get("response"):
            logger.error(f"No valid AI response from Alltius: {data}")
            raise AlltiusError("No valid AI response received", 500, str(data))

        logger.info(f"Received Alltius answer {data.get('id')} ({len(str(data['response']))} characters)")

        return AlltiusAnswer(
            response=str(data["response"]),
            id=data.get("id"),
            intent_type=data.get("intent_type")
        )
