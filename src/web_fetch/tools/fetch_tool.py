"""Fetch tool - perform one HTTP exchange via httpx."""

import asyncio
import logging
from typing import Optional

import httpx

from ..config.loader import HttpConfig
from ..models.http_outcome import HttpOutcome
from ..models.request_spec import RequestSpec
from ..models.tool_error import ToolError
from .validate_tool import normalize_headers

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class HttpExecutor:
    """
    Issues exactly one HTTP request per call.
    Non-2xx responses are returned, not raised; only connection-level
    faults become TransportFailure.
    """

    def __init__(
        self,
        config: Optional[HttpConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or HttpConfig()
        # Injected in tests; None means a real network transport
        self._transport = transport

    def effective_timeout_ms(self, spec: RequestSpec) -> Optional[float]:
        if spec.timeout_ms is not None:
            return spec.timeout_ms
        return self.config.default_timeout_ms

    def request_headers(self, spec: RequestSpec) -> dict[str, str]:
        """Configured default headers, overridden by the caller's."""
        return normalize_headers({**self.config.default_headers, **spec.headers})

    async def execute(self, spec: RequestSpec) -> HttpOutcome:
        """
        Send the request and read the whole body.
        The timeout covers headers and body together.
        """
        timeout_ms = self.effective_timeout_ms(spec)
        logger.info("Fetching %s with method %s", spec.url, spec.method)
        try:
            if timeout_ms is None:
                return await self._exchange(spec, None)
            seconds = timeout_ms / 1000
            return await asyncio.wait_for(self._exchange(spec, seconds), timeout=seconds)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise ToolError.transport_failure(
                f"Request timed out after {timeout_ms:g} ms"
            ) from e
        except httpx.RequestError as e:
            raise ToolError.transport_failure(_describe(e)) from e
        except httpx.InvalidURL as e:
            raise ToolError.invalid_input(f"Invalid URL: {_describe(e)}") from e

    async def _exchange(self, spec: RequestSpec, timeout_s: Optional[float]) -> HttpOutcome:
        content = None
        if spec.sends_body:
            content = spec.body.encode("utf-8")
        elif spec.body is not None:
            logger.debug("Dropping request body for %s request to %s", spec.method, spec.url)

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(timeout_s),
            follow_redirects=spec.follow_redirects,
            max_redirects=self.config.max_redirects,
            verify=self.config.verify_tls,
            trust_env=self.config.trust_env,
        ) as client:
            # Drop httpx's own defaults (User-Agent, Accept, ...); Host and
            # framing headers are still added per request
            client.headers.clear()
            request = client.build_request(
                spec.method,
                spec.url,
                headers=self.request_headers(spec),
                content=content,
            )
            response = await client.send(request, stream=True)
            try:
                body = await response.aread()
            finally:
                await response.aclose()

        logger.debug(
            "Fetched %s: HTTP %s, %d bytes, final url %s",
            spec.url,
            response.status_code,
            len(body),
            response.url,
        )
        return HttpOutcome(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            final_url=str(response.url),
            headers=list(response.headers.multi_items()),
            charset=response.charset_encoding,
            body=body,
        )
