"""Error handling helpers for pages that call the analysis backend."""
from typing import Any, Dict
import logging

from src.integrations.contracts.envelope import ApiError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "An internal error occurred while processing your request. Please try again later."


class ErrorHandler:
    def __init__(self, default_message: str = DEFAULT_MESSAGE):
        self.default_message = default_message

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if isinstance(exc, ApiError):
            logger.warning("API call failed: status=%s kind=%s message=%s", exc.status, exc.kind.value, exc.message)
            return {
                "message": exc.message,
                "fallback": True,
                "metadata": {
                    "status": exc.status,
                    "kind": exc.kind.value,
                    "response": exc.response,
                    "context": context or {},
                },
            }
        logger.error("Unhandled exception calling analysis backend: %s", exc, exc_info=True)
        return {
            "message": self.default_message,
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
