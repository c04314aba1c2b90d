"""
Exceptions raised by the AskTacit services.
Routes translate them into HTTP errors using status_code and to_dict().
"""
from typing import Any, Dict, Optional
from fastapi import HTTPException


class AskTacitError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidInputError(AskTacitError):
    """Request data failed a precondition (blank prompt, missing fields, unknown version)."""
    status_code = 400


class ConfigurationError(AskTacitError):
    """A credential or identifier needed to reach an upstream service is not configured."""
    status_code = 500


class AlltiusError(AskTacitError):
    pass


class AirtableError(AskTacitError):
    pass


class EmptyAnswerError(AskTacitError):
    """The assistant answered with nothing usable."""
    status_code = 502


def to_http_exception(error: AskTacitError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.to_dict())
