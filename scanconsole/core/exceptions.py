# scanconsole/core/exceptions.py
"""
Request-scoped error types.

Every error raised here is mapped onto an HTTP response by the handlers
registered in ``scanconsole.main``; none of them is fatal to the process.
"""

from typing import Dict, Optional


class ConsoleError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_response(self) -> Dict[str, object]:
        return {"message": self.message}


class ValidationError(ConsoleError):
    """Input failed validation (bad id, bad struct, key mismatch, bad value)"""

    status_code = 400

    def __init__(self, message: str, error_fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.error_fields = error_fields or {}

    def to_response(self) -> Dict[str, object]:
        return {"message": self.message, "error_fields": self.error_fields}

    @classmethod
    def for_field(cls, struct: str, field: str, reason: str) -> "ValidationError":
        """Build a field-qualified error in the ``Key: 'Struct.Field' Error:reason`` form"""
        message = f"Key: '{struct}.{field}' Error:{reason}"
        return cls(message, {field.lower(): reason})


class NotFoundError(ConsoleError):
    """Requested row does not exist"""

    status_code = 404


class SearchServiceError(ConsoleError):
    """Remote search / scan results service rejected a request"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code
