"""Validate tool - turn raw tool-call arguments into a RequestSpec."""

from typing import Any, Literal, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..models.request_spec import (
    HtmlFragmentRepresentation,
    MetadataRepresentation,
    MultiMatchPolicy,
    RequestSpec,
    StatusTolerance,
    representation_for,
)
from ..models.tool_error import ToolError


FetchMethod = Literal["GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "PATCH"]
ExtractMethod = Literal["GET", "POST"]
ResponseType = Literal["text", "json", "binary", "html-fragment"]


class _UrlArgs(BaseModel):
    """Arguments shared by every tool."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    url: str = Field(..., description="URL to fetch")
    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Request timeout in milliseconds",
    )

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        value = value.strip()
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"'{value}' is not an absolute URL")
        return value


class _RequestArgs(_UrlArgs):
    headers: Optional[dict[str, str]] = None
    body: Optional[str] = None
    follow_redirects: bool = Field(default=True, alias="followRedirects")

    @field_validator("method", mode="before", check_fields=False)
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class FetchUrlArgs(_RequestArgs):
    """Arguments of fetch-url."""

    method: FetchMethod = "GET"
    response_type: ResponseType = Field(default="text", alias="responseType")
    fragment_selector: Optional[str] = Field(default=None, alias="fragmentSelector")


class CheckStatusArgs(_UrlArgs):
    """Arguments of check-status. Any method given by the caller is ignored."""


class ExtractHtmlFragmentArgs(_RequestArgs):
    """Arguments of extract-html-fragment."""

    selector: str
    anchor_id: Optional[str] = Field(default=None, alias="anchorId")
    method: ExtractMethod = "GET"

    @field_validator("selector")
    @classmethod
    def _non_empty_selector(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("selector must not be empty")
        return value

    @field_validator("anchor_id")
    @classmethod
    def _blank_anchor_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


def normalize_headers(headers: Optional[dict[str, str]]) -> dict[str, str]:
    """
    Collapse header names case-insensitively.
    The last occurrence wins and keeps its own spelling.
    """
    merged: dict[str, tuple[str, str]] = {}
    for name, value in (headers or {}).items():
        merged.pop(name.lower(), None)
        merged[name.lower()] = (name, value)
    return dict(merged.values())


def _format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "Invalid arguments: " + "; ".join(parts)


def _parse(model: type[BaseModel], arguments: Any) -> Any:
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolError.invalid_input("Invalid arguments: expected an object")
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise ToolError.invalid_input(_format_validation_error(e)) from e


def validate_fetch_args(arguments: Any) -> RequestSpec:
    """Validate fetch-url arguments."""
    args: FetchUrlArgs = _parse(FetchUrlArgs, arguments)
    representation = representation_for(args.response_type, args.fragment_selector)
    return RequestSpec(
        url=args.url,
        method=args.method,
        headers=normalize_headers(args.headers),
        body=args.body,
        timeout_ms=args.timeout,
        follow_redirects=args.follow_redirects,
        representation=representation,
        status_tolerance=StatusTolerance.LENIENT,
    )


def validate_status_args(arguments: Any) -> RequestSpec:
    """Validate check-status arguments. Always a HEAD request."""
    args: CheckStatusArgs = _parse(CheckStatusArgs, arguments)
    return RequestSpec(
        url=args.url,
        method="HEAD",
        timeout_ms=args.timeout,
        follow_redirects=True,
        representation=MetadataRepresentation(),
        status_tolerance=StatusTolerance.LENIENT,
    )


def validate_extract_args(arguments: Any) -> RequestSpec:
    """Validate extract-html-fragment arguments."""
    args: ExtractHtmlFragmentArgs = _parse(ExtractHtmlFragmentArgs, arguments)
    return RequestSpec(
        url=args.url,
        method=args.method,
        headers=normalize_headers(args.headers),
        body=args.body,
        timeout_ms=args.timeout,
        follow_redirects=args.follow_redirects,
        representation=HtmlFragmentRepresentation(
            selector=args.selector,
            anchor_id=args.anchor_id,
            multi_match=MultiMatchPolicy.ENUMERATE,
        ),
        status_tolerance=StatusTolerance.STRICT_2XX,
    )
