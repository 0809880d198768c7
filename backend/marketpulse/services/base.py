"""
Base Service Interface

Every MarketPulse service (synthesizer, indicators, market data) derives
from BaseService and reports failures through the ServiceError family.
Each error class carries the HTTP status the API layer answers with.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for all services.

    A service turns one request model into one response model, may add
    checks beyond Pydantic in validate_input, and reports its health.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name used in logs and error prefixes."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service's main operation.

        Raises:
            ServiceError: If the operation cannot produce a result
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass

    async def validate_input(self, input_data: InputT) -> InputT:
        """Pydantic already validated the shape; override for semantic checks."""
        return input_data


class ServiceError(Exception):
    """
    Base exception for service errors.

    Attributes:
        service_name: Service that raised the error
        message: Human readable reason, safe to return to API clients
        details: Extra context for logs (symbol, offending value, ...)
    """

    status_code: int = 500

    def __init__(self, service_name: str, message: str, details: Optional[dict] = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """A request passed schema validation but is semantically invalid (bad as_of_date)."""

    status_code = 422


class ExternalAPIError(ServiceError):
    """Upstream quote provider is disabled, unreachable or returned a malformed payload."""

    status_code = 503


class NoDataError(ServiceError):
    """The upstream answered with an empty price series; indicators cannot be computed."""

    status_code = 404
