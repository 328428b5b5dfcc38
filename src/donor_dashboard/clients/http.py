# -*- coding: utf-8 -*-
"""Async HTTP client with bounded attempts and rate-limit handling."""

from __future__ import annotations

import asyncio
import json as jsonlib
import random
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from donor_dashboard.config import Settings
from donor_dashboard.exceptions import LedgerAPIError


class AsyncHttpClient:
    """Async HTTP client for ledger services with bounded attempts and 429 handling.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.

    The number of attempts comes from settings.ledger.max_retries, which
    defaults to 1: a fetch surfaces one failure per call and retry policy
    stays with the caller.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (timeout, max_retries).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.ledger.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter, capped at 4 seconds."""
        base = min(4.0, 0.25 * (2**attempt))
        return base + random.uniform(0.0, 0.15)

    @staticmethod
    def _retry_after(response: aiohttp.ClientResponse) -> Optional[float]:
        header = response.headers.get("Retry-After")
        if not header:
            return None
        try:
            return float(header)
        except ValueError:
            return None

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        request_id = uuid.uuid4().hex[:12]
        max_retries = self._settings.ledger.max_retries
        event_prefix = f"http_{method.lower()}"
        last_error: Optional[Exception] = None

        with bound_contextvars(
            http_url=url,
            http_method=method,
            http_request_id=request_id,
            http_max_retries=max_retries,
        ):
            for attempt in range(max_retries):
                is_last = attempt + 1 >= max_retries
                with bound_contextvars(http_attempt=attempt + 1):
                    try:
                        session = await self._get_session()
                        async with session.request(
                            method, url, params=params, json=json
                        ) as response:
                            if response.status == 429:
                                retry_after = self._retry_after(response)
                                self._logger.warning(
                                    f"{event_prefix}_rate_limited",
                                    http_status_code=429,
                                    http_retry_after_seconds=retry_after,
                                )
                                last_error = LedgerAPIError(
                                    "Rate limit exceeded (429)", url=url, status_code=429
                                )
                                if is_last:
                                    break
                                if retry_after is not None and retry_after > 0:
                                    await asyncio.sleep(retry_after)
                                else:
                                    await asyncio.sleep(self._backoff_delay(attempt))
                                continue

                            response.raise_for_status()
                            body = await response.text()
                            return jsonlib.loads(body) if body else None
                    except aiohttp.ClientResponseError as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_attempt_failed",
                            error_type=type(e).__name__,
                            error_message=str(e),
                            http_status_code=getattr(e, "status", None),
                        )
                    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_attempt_failed",
                            error_type=type(e).__name__,
                            error_message=str(e),
                        )
                    if not is_last:
                        await asyncio.sleep(self._backoff_delay(attempt))

            status_code = getattr(last_error, "status", None) or getattr(
                last_error, "status_code", None
            )
            self._logger.error(
                f"{event_prefix}_failed",
                http_status_code=status_code,
                http_attempts=max_retries,
                error_type=type(last_error).__name__ if last_error else None,
                error_message=str(last_error) if last_error else None,
            )
            raise LedgerAPIError(
                f"{method} failed after {max_retries} attempt(s): {url}",
                url=url,
                status_code=status_code,
                cause=last_error,
            ) from last_error

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON.

        Args:
            url: Full URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response (dict, list, or None for an empty body).

        Raises:
            LedgerAPIError: If every attempt fails (transport, HTTP status, 429 or bad JSON).
        """
        return await self._request("GET", url, params=params or {})

    async def post(
        self,
        url: str,
        *,
        json: Optional[Any] = None,
    ) -> Any:
        """Perform a POST request with JSON body and return parsed JSON.

        Args:
            url: Full URL to request.
            json: Optional JSON-serializable body.

        Returns:
            Parsed JSON response (dict, list, or None for an empty body).

        Raises:
            LedgerAPIError: If every attempt fails.
        """
        return await self._request("POST", url, json=json if json is not None else {})
