"""Data models for the web fetch server."""

from .request_spec import (
    ALLOWED_METHODS,
    HTTP_METHODS,
    BODY_METHODS,
    RESPONSE_TYPES,
    BinaryRepresentation,
    HtmlFragmentRepresentation,
    JsonRepresentation,
    MetadataRepresentation,
    MultiMatchPolicy,
    Representation,
    RequestSpec,
    StatusTolerance,
    TextRepresentation,
    representation_for,
)
from .http_outcome import HttpOutcome
from .fetch_result import FetchResult, StatusResult, FragmentResult
from .fragment_match import FragmentMatch
from .tool_error import ErrorKind, ToolError

__all__ = [
    "ALLOWED_METHODS",
    "HTTP_METHODS",
    "BODY_METHODS",
    "RESPONSE_TYPES",
    "BinaryRepresentation",
    "HtmlFragmentRepresentation",
    "JsonRepresentation",
    "MetadataRepresentation",
    "MultiMatchPolicy",
    "Representation",
    "RequestSpec",
    "StatusTolerance",
    "TextRepresentation",
    "representation_for",
    "HttpOutcome",
    "FetchResult",
    "StatusResult",
    "FragmentResult",
    "FragmentMatch",
    "ErrorKind",
    "ToolError",
]
