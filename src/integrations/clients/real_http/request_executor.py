"""
Request Executor.

Purpose:
- Executes exactly one HTTP call per RequestDescriptor against the analysis backend
- Enforces the descriptor's deadline over the whole send-and-read
- Classifies every failure into one ApiError kind and never lets transport
  exceptions escape to callers

Usage:
- Built once from ApiClientConfig and shared by AuditApiClient
- Tests pass an httpx.MockTransport through ``transport``

Important:
- Keep this module as the ONLY place where backend HTTP calls are made.
- No retries, no caching: one network attempt per call.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.envelope import ApiError, ApiResponse, Failure, Success, failure_from_status
from src.integrations.contracts.requests import BodyEncoding, RequestDescriptor
from src.utils.config_loader import ApiClientConfig

logger = logging.getLogger(__name__)


class RequestExecutor:
    def __init__(self, config: ApiClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        self.base_url = config.base_url
        self._transport = transport

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def execute(self, descriptor: RequestDescriptor) -> ApiResponse:
        """
        Send the request and return Success(payload) or Failure(ApiError).

        The deadline covers connecting, sending, and reading the body. When it
        fires the in-flight request is cancelled and the timeout error is
        returned even if the server would have answered later.
        """
        url = self.url_for(descriptor.path)
        logger.info("%s %s (deadline=%ss)", descriptor.method, url, descriptor.deadline_seconds)
        try:
            response = await asyncio.wait_for(self._send(url, descriptor), timeout=descriptor.deadline_seconds)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Request to %s timed out after %ss", url, descriptor.deadline_seconds)
            return Failure(ApiError.timeout())
        except httpx.ConnectError as e:
            logger.error("Cannot connect to %s: %s", url, e)
            return Failure(ApiError.connection())
        except Exception:
            logger.exception("Unexpected error calling %s", url)
            return Failure(ApiError.network())

        return self._classify(url, response, descriptor)

    async def _send(self, url: str, descriptor: RequestDescriptor) -> httpx.Response:
        # Per-phase httpx timeouts are disabled; the overall deadline is wait_for's.
        async with httpx.AsyncClient(timeout=None, follow_redirects=True, transport=self._transport) as client:
            if descriptor.encoding is BodyEncoding.MULTIPART:
                logger.debug("Multipart fields: %s", list(descriptor.field_names))
                return await client.request(descriptor.method, url, files=descriptor.multipart_parts())
            headers: Dict[str, str] = {"Content-Type": "application/json"}
            return await client.request(descriptor.method, url, headers=headers)

    def _classify(self, url: str, response: httpx.Response, descriptor: RequestDescriptor) -> ApiResponse:
        if not response.is_success:
            body = _parse_json_or_empty(response)
            failure = failure_from_status(response.status_code, response.reason_phrase, body)
            logger.error(
                "HTTP error from %s: %s %s",
                url,
                response.status_code,
                failure.error.message,
            )
            return failure

        logger.info("Received response from %s: status=%s", url, response.status_code)
        if descriptor.binary_result:
            return Success(response.content, response.status_code)
        try:
            return Success(response.json(), response.status_code)
        except ValueError:
            logger.error("Response from %s is not valid JSON", url)
            return Failure(ApiError.network())


def _parse_json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}
