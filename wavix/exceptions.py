"""
Wavix Python SDK - Exceptions

This module contains all custom exceptions used by the SDK.
"""

from typing import Optional, Dict, Any


INTERNAL_ERROR_MESSAGE = "Internal server error"
UNKNOWN_ERROR_MESSAGE = "Unknown error"
NO_FILE_DOWNLOADED_MESSAGE = "No file was downloaded"


class WavixError(Exception):
    """
    Base exception for all Wavix SDK errors.

    Attributes:
        message: Human-readable error message
        code: Error code if available
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', code='{self.code}')"


class AuthenticationError(WavixError):
    """
    Raised when the client is created without an application identifier.
    """

    def __init__(self, message: str = "Application id is required") -> None:
        super().__init__(message, code="AUTHENTICATION_ERROR")


class ValidationError(WavixError):
    """
    Raised when request input fails local validation.

    No request is sent to the API when this is raised.

    Attributes:
        field_errors: Dictionary mapping field names to error messages
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=field_errors)
        self.field_errors = field_errors or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_errors:
            errors = ", ".join(f"{k}: {v}" for k, v in self.field_errors.items())
            return f"{base} ({errors})"
        return base


class APIError(WavixError):
    """
    Raised when the API reports a failure.

    The API signals failures with ``"error": true`` or ``"success": false``
    in the response body, whatever the HTTP status code.

    Attributes:
        status_code: HTTP status code of the response
        field_errors: Per-field error messages returned by the API
    """

    def __init__(
        self,
        message: str = UNKNOWN_ERROR_MESSAGE,
        status_code: Optional[int] = None,
        field_errors: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message, code="API_ERROR", details=field_errors)
        self.status_code = status_code
        self.field_errors = field_errors or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_errors:
            errors = ", ".join(f"{k}: {v}" for k, v in self.field_errors.items())
            return f"{base} ({errors})"
        return base


class InternalError(WavixError):
    """
    Raised when a request could not be completed or its response decoded.

    Network failures, timeouts and malformed response bodies all surface
    as this error with the same generic message.
    """

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message, code="INTERNAL_ERROR")


class DownloadError(WavixError):
    """Raised when a download response does not carry a file attachment."""

    def __init__(self, message: str = NO_FILE_DOWNLOADED_MESSAGE) -> None:
        super().__init__(message, code="DOWNLOAD_ERROR")


class UploadError(WavixError):
    """
    Raised when a multipart upload fails.

    This can occur when:
    - The file stream cannot be read
    - The request cannot be sent
    - The API answers with an unexpected status
    """

    def __init__(self, message: str = "Upload failed") -> None:
        super().__init__(message, code="UPLOAD_ERROR")


class StartCallError(WavixError):
    """
    Raised when an outbound call cannot be started.

    Mirrors the API's call start failure body:
    ``{"success": false, "message": ..., "error": {...}}``.

    Attributes:
        success: Always False
        errors: Per-field error messages
    """

    def __init__(
        self,
        message: str = "Failed to start call",
        errors: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message, code="START_CALL_ERROR", details=errors)
        self.success = False
        self.errors = errors or {}


class WebSocketError(WavixError):
    """
    Raised when the call events connection cannot be established.

    Attributes:
        close_code: WebSocket close code, if any
    """

    def __init__(
        self,
        message: str = "WebSocket error",
        close_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, code="WEBSOCKET_ERROR")
        self.close_code = close_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.close_code:
            return f"{base} (Close code: {self.close_code})"
        return base
