"""Pipeline stages behind the MCP tools."""

from .validate_tool import validate_fetch_args, validate_status_args, validate_extract_args
from .fetch_tool import HttpExecutor
from .extract_tool import parse_html, extract_fragment
from .transform_tool import transform
from .serialize_tool import ToolEnvelope, success_envelope, error_envelope

__all__ = [
    "validate_fetch_args",
    "validate_status_args",
    "validate_extract_args",
    "HttpExecutor",
    "parse_html",
    "extract_fragment",
    "transform",
    "ToolEnvelope",
    "success_envelope",
    "error_envelope",
]
