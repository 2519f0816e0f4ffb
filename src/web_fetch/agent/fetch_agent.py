"""Fetch agent - composes the pipeline behind each tool."""

import logging
from typing import Any, Awaitable, Callable, Optional

import httpx
from pydantic import BaseModel

from ..config.loader import Config
from ..models.fetch_result import FetchResult, FragmentResult, StatusResult
from ..models.tool_error import ToolError
from ..tools.fetch_tool import HttpExecutor
from ..tools.serialize_tool import (
    ToolEnvelope,
    error_envelope,
    success_envelope,
    unexpected_error_envelope,
    unknown_tool_envelope,
)
from ..tools.transform_tool import transform
from ..tools.validate_tool import (
    validate_extract_args,
    validate_fetch_args,
    validate_status_args,
)

logger = logging.getLogger(__name__)


def is_available(status: int) -> bool:
    """Reachable means 2xx or 3xx."""
    return 200 <= status <= 399


class FetchAgent:
    """
    Runs validate -> fetch -> transform -> serialize for each tool.
    Holds only configuration; every call owns its request, response and
    parse tree, so concurrent calls do not interact.
    Does NOT parse HTML or speak HTTP itself.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or Config()
        self.executor = HttpExecutor(self.config.http, transport=transport)
        self._handlers: dict[str, Callable[[Any], Awaitable[BaseModel]]] = {
            "fetch-url": self.fetch_url,
            "check-status": self.check_status,
            "extract-html-fragment": self.extract_html_fragment,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def call(self, name: str, arguments: Any) -> ToolEnvelope:
        """Run one tool call. Always returns an envelope, never raises ToolError."""
        handler = self._handlers.get(name)
        if handler is None:
            return unknown_tool_envelope(name)
        try:
            result = await handler(arguments)
        except ToolError as e:
            return error_envelope(name, e)
        except Exception as e:
            return unexpected_error_envelope(name, e)
        return success_envelope(result)

    async def fetch_url(self, arguments: Any) -> FetchResult:
        spec = validate_fetch_args(arguments)
        outcome = await self.executor.execute(spec)
        return transform(outcome, spec.representation, spec.status_tolerance)

    async def check_status(self, arguments: Any) -> StatusResult:
        spec = validate_status_args(arguments)
        logger.info("Checking status of %s", spec.url)
        outcome = await self.executor.execute(spec)
        result = transform(outcome, spec.representation, spec.status_tolerance)
        return StatusResult(
            status=result.status,
            status_text=result.status_text,
            headers=result.headers,
            url=result.url,
            is_available=is_available(result.status),
        )

    async def extract_html_fragment(self, arguments: Any) -> FragmentResult:
        spec = validate_extract_args(arguments)
        selector = spec.representation.selector
        logger.info("Extracting %r from %s", selector, spec.url)
        outcome = await self.executor.execute(spec)
        result = transform(outcome, spec.representation, spec.status_tolerance)
        return FragmentResult(
            status=result.status,
            status_text=result.status_text,
            url=result.url,
            selector=selector,
            match_count=result.match_count,
            html=result.content,
        )
