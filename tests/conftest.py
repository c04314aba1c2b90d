"""Shared fixtures: configured settings and in-memory stand-ins for Alltius and Airtable."""
import asyncio
import httpx
import pytest
from core.config import settings
from models.alltius_answer import AlltiusAnswer
from services.rfp_service import RfpService


class FakeAlltius:
    """Records every chat call and answers with a canned response."""

    def __init__(self, response="1. Answer"):
        self.response = response
        self.error = None
        self.calls = []
        self.assistant_ids = []

    def factory(self, assistant_id=None):
        self.assistant_ids.append(assistant_id)
        return self

    async def chat(self, prompt, chat_session=None, user_identifier=None, source="epi_tool"):
        self.calls.append({
            "prompt": prompt,
            "chat_session": chat_session,
            "user_identifier": user_identifier,
            "source": source
        })
        if self.error is not None:
            raise self.error
        return AlltiusAnswer(response=self.response, id="post-1", intent_type="answer")


class FakeAirtable:
    """Keeps records in a list and remembers which profile each call targeted."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.profiles = []
        self.created = []
        self.updated = []

    def factory(self, profile=None):
        self.profiles.append(profile)
        return self

    async def list_records(self):
        return list(self.records)

    async def create_record(self, fields):
        record = {"id": f"rec{len(self.created) + 1}", "fields": fields, "createdTime": "2024-05-01T10:00:00.000Z"}
        self.created.append(record)
        return record

    async def update_record(self, record_id, fields):
        self.updated.append((record_id, fields))
        return {"id": record_id, "fields": fields}


@pytest.fixture
def configured(monkeypatch):
    """Credentials for both upstream services, without touching the real environment."""
    monkeypatch.setattr(settings, "ALLTIUS_API_KEY", "test-alltius-key")
    monkeypatch.setattr(settings, "ALLTIUS_ASSISTANT_ID", "default-assistant")
    monkeypatch.setattr(settings, "AIRTABLE_API_KEY", "test-airtable-key")
    monkeypatch.setattr(settings, "AIRTABLE_BASE_ID", "appLegacyBase")
    monkeypatch.setattr(settings, "AIRTABLE_TABLE_NAME", "RFPs")
    return settings


@pytest.fixture
def fake_alltius():
    return FakeAlltius()


@pytest.fixture
def fake_airtable():
    return FakeAirtable()


@pytest.fixture
def rfp_service(fake_alltius, fake_airtable):
    return RfpService(alltius_factory=fake_alltius.factory, airtable_factory=fake_airtable.factory)


@pytest.fixture
def run():
    """Run a coroutine to completion from a synchronous test."""
    return asyncio.run


@pytest.fixture
def mock_client():
    """Build an AsyncClient whose requests are answered by handler."""
    def build(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return build
