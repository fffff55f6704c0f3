"""
Exceptions raised by CEP lookups
"""

from typing import Optional

from buscacep.utils.error_handler import ErrorType


class CepError(Exception):
    """Base error for every failed lookup."""

    error_type = ErrorType.UNKNOWN_ERROR
    prefix = "Lookup error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidInputError(CepError):
    """Raised when the CEP fails local validation. Never reaches the network."""

    error_type = ErrorType.VALIDATION_ERROR
    prefix = "Invalid input"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class HttpRequestError(CepError):
    """Raised on transport failures and non-2xx responses."""

    prefix = "HTTP request error"

    def __init__(
        self,
        detail: str,
        status_code: Optional[int] = None,
        error_type: ErrorType = ErrorType.API_ERROR
    ):
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(detail)


class DecodeError(CepError):
    """Raised when the response body is not a valid Correios envelope."""

    error_type = ErrorType.DECODE_ERROR
    prefix = "Decode error"


class NotFoundError(CepError):
    """Raised when Correios answers with no address for the CEP."""

    error_type = ErrorType.CEP_NOT_FOUND
    prefix = "Not found"

    def __init__(self, cep: Optional[str] = None, message: Optional[str] = None):
        self.cep = cep
        self.message = message
        detail = f"CEP {cep} not found" if cep else "no address in response"
        if message:
            detail += f" ({message})"
        super().__init__(detail)
