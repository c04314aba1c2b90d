import httpx
from typing import Any, Dict, List, Optional
from urllib.parse import quote
from models.api_response import ApiResponse
from services.http_client import global_fetch
from core.config import settings
from core.errors import AirtableError, ConfigurationError
from core.logger import get_logger

logger = get_logger(__name__)

class AirtableService:
    def __init__(
            self,
            base_id: Optional[str] = None,
            table_name: Optional[str] = None,
            api_key: Optional[str] = None,
            client: Optional[httpx.AsyncClient] = None
        ):
        self.base_id = base_id or settings.AIRTABLE_BASE_ID
        self.table_name = table_name or settings.AIRTABLE_TABLE_NAME
        self.api_key = api_key or settings.AIRTABLE_API_KEY

        if not all([
            self.base_id,
            self.table_name,
            self.api_key
        ]):
            logger.error("Missing required Airtable API credentials")
            raise ConfigurationError("Missing Airtable API Key, Base ID, or Table Name.")

        self.client = client

    @property
    def table_url(self) -> str:
        return f"{settings.AIRTABLE_API_URL.rstrip('/')}/{quote(self.base_id)}/{quote(self.table_name)}"

    def record_url(self, record_id: str) -> str:
        return f"{self.table_url}/{quote(record_id)}"

    async def _request(self, url: str, method: str = "GET", body: Optional[dict] = None) -> Dict[str, Any]:
        result: ApiResponse = await global_fetch(
            url,
            method=method,
            body=body,
            headers={"Authorization": f"Bearer {self.api_key}"},
            client=self.client
        )

        if not result.success:
            logger.error(f"Airtable {method} {self.table_name} failed: {result.error}")
            raise AirtableError(f"Airtable error: {result.error}", result.status_code or 500)

        if not isinstance(result.data, dict):
            logger.error(f"Airtable {method} {self.table_name} returned a non-object body")
            raise AirtableError("Airtable error: unexpected response body", 502, result.data)

        return result.data

    async def list_records(self) -> List[Dict[str, Any]]:
        """
        Fetch every record of the table, following Airtable's offset cursor
        until the last page.
        """
        records: List[Dict[str, Any]] = []
        offset = None

        while True:
            url = self.table_url if offset is None else f"{self.table_url}?offset={quote(offset)}"
            data = await self._request(url)
            records.extend(data.get("records", []))
            offset = data.get("offset")
            if not offset:
                break

        logger.info(f"Fetched {len(records)} records from Airtable table {self.table_name}")
        return records

    async def create_record(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        data = await self._request(self.table_url, method="POST", body={"records": [{"fields": fields}]})

        records = data.get("records") or []
        if not records:
            raise AirtableError("Airtable error: no record returned", 502, data)

        logger.info(f"Created Airtable record {records[0].get('id')} in {self.table_name}")
        return records[0]

    async def update_record(self, record_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        data = await self._request(self.record_url(record_id), method="PATCH", body={"fields": fields})
        logger.info(f"Updated Airtable record {record_id} in {self.table_name}")
        return data
