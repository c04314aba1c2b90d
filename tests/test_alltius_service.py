"""Tests for the Alltius assistant client."""
import json
import httpx
import pytest
from core.errors import AlltiusError, ConfigurationError
from services.alltius_service import AlltiusService


def answer_with(response):
    def handler(request):
        return response
    return handler


def chat(run, mock_client, handler, **kwargs):
    async def call():
        async with mock_client(handler) as client:
            return await AlltiusService(client=client, **kwargs).chat("What is SOC 2?")
    return run(call())


class TestAlltiusConfiguration:
    """Credentials are checked when the service is created."""

    def test_missing_api_key(self, configured, monkeypatch):
        monkeypatch.setattr(configured, "ALLTIUS_API_KEY", None)

        with pytest.raises(ConfigurationError) as error:
            AlltiusService()
        assert error.value.message == "Alltius API not properly configured"

    def test_missing_assistant_id(self, configured, monkeypatch):
        monkeypatch.setattr(configured, "ALLTIUS_ASSISTANT_ID", None)

        with pytest.raises(ConfigurationError) as error:
            AlltiusService()
        assert error.value.status_code == 500

    def test_explicit_assistant_id_wins(self, configured):
        assert AlltiusService(assistant_id="cyber-assistant").assistant_id == "cyber-assistant"
        assert AlltiusService().assistant_id == "default-assistant"


class TestAlltiusChat:
    """Requests sent to and answers read from the chat endpoint."""

    def test_chat_request_and_answer(self, configured, run, mock_client):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["authorization"] = request.headers["authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"response": "SOC 2 is an audit.", "id": "post-42", "intent_type": "qa"})

        answer = chat(run, mock_client, handler)

        assert answer.response == "SOC 2 is an audit."
        assert answer.id == "post-42"
        assert answer.intent_type == "qa"
        assert seen["url"] == configured.ALLTIUS_CHAT_URL
        assert seen["authorization"] == "test-alltius-key"
        body = seen["body"]
        assert body["post"] == "What is SOC 2?"
        assert body["assistant_id"] == "default-assistant"
        assert body["chat_session"] == "new-session"
        assert body["user_identifier"] == "test_user"
        assert body["post_metadata"]["source"] == "epi_tool"
        assert body["post_metadata"]["timestamp"]

    def test_authentication_error(self, configured, run, mock_client):
        handler = answer_with(httpx.Response(401, json={"error": "unauthorized"}))

        with pytest.raises(AlltiusError) as error:
            chat(run, mock_client, handler)
        assert error.value.status_code == 401
        assert error.value.message == "Authentication Error"

    def test_upstream_status_is_passed_through(self, configured, run, mock_client):
        handler = answer_with(httpx.Response(503, json={"error": "assistant unavailable"}))

        with pytest.raises(AlltiusError) as error:
            chat(run, mock_client, handler)
        assert error.value.status_code == 503
        assert error.value.to_dict() == {"error": "Alltius API Error: 503", "details": "assistant unavailable"}

    def test_invalid_json(self, configured, run, mock_client):
        handler = answer_with(httpx.Response(200, text="not json"))

        with pytest.raises(AlltiusError) as error:
            chat(run, mock_client, handler)
        assert error.value.status_code == 500
        assert error.value.message == "Invalid JSON response from Alltius"

    def test_answer_without_response(self, configured, run, mock_client):
        handler = answer_with(httpx.Response(200, json={"id": "post-1"}))

        with pytest.raises(AlltiusError) as error:
            chat(run, mock_client, handler)
        assert error.value.message == "No valid AI response received"

    def test_connection_failure(self, configured, run, mock_client):
        def handler(request):
            raise httpx.ConnectError("no route to host", request=request)

        with pytest.raises(AlltiusError) as error:
            chat(run, mock_client, handler)
        assert error.value.status_code == 500
        assert error.value.message == "Failed to connect to Alltius API"
        assert error.value.details == "no route to host"
