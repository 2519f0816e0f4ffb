"""Serialize tool - wrap results and failures into outward envelopes."""

import json
import logging
from dataclasses import dataclass

from pydantic import BaseModel

from ..models.tool_error import ToolError

logger = logging.getLogger(__name__)

# Message prefix per tool
ERROR_TAGS = {
    "fetch-url": "Error fetching URL",
    "check-status": "Error checking URL status",
    "extract-html-fragment": "Error extracting HTML fragment",
}


@dataclass(frozen=True)
class ToolEnvelope:
    """What the transport adapter sends back for one tool call."""

    text: str
    is_error: bool = False


def success_envelope(result: BaseModel) -> ToolEnvelope:
    """Pretty-printed JSON with camelCase keys; unset optional fields omitted."""
    data = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    return ToolEnvelope(text=json.dumps(data, indent=2, ensure_ascii=False))


def error_envelope(tool_name: str, error: ToolError) -> ToolEnvelope:
    tag = ERROR_TAGS.get(tool_name, f"Error in {tool_name}")
    logger.warning("%s failed (%s): %s", tool_name, error.kind.value, error.message)
    return ToolEnvelope(text=f"{tag}: {error.message}", is_error=True)


def unexpected_error_envelope(tool_name: str, exc: Exception) -> ToolEnvelope:
    """For exceptions outside the classified kinds; the server keeps running."""
    tag = ERROR_TAGS.get(tool_name, f"Error in {tool_name}")
    logger.exception("Unexpected failure in %s", tool_name)
    return ToolEnvelope(text=f"{tag}: {exc}", is_error=True)


def unknown_tool_envelope(tool_name: str) -> ToolEnvelope:
    logger.warning("Unknown tool requested: %s", tool_name)
    return ToolEnvelope(text=f"Unknown tool: {tool_name}", is_error=True)
