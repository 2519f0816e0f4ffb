"""Transform tool - convert an HttpOutcome into a typed FetchResult."""

import base64
import codecs
import json
import logging

from ..models.fetch_result import FetchResult
from ..models.http_outcome import HttpOutcome
from ..models.request_spec import (
    BinaryRepresentation,
    HtmlFragmentRepresentation,
    JsonRepresentation,
    MetadataRepresentation,
    Representation,
    StatusTolerance,
    TextRepresentation,
)
from ..models.tool_error import ToolError
from .extract_tool import extract_fragment, parse_html

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"


def decode_body(outcome: HttpOutcome) -> str:
    """Decode with the declared charset, or UTF-8 when absent or unknown."""
    charset = outcome.charset or DEFAULT_CHARSET
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.debug("Unknown charset %r from %s, using %s", charset, outcome.final_url, DEFAULT_CHARSET)
        charset = DEFAULT_CHARSET
    return outcome.body.decode(charset, errors="replace")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def _json_content(outcome: HttpOutcome) -> str:
    text = decode_body(outcome).removeprefix("\ufeff")
    try:
        value = json.loads(text, parse_constant=_reject_constant)
        # Overflowing numbers such as 1e400 parse to inf without parse_constant
        return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError as e:
        raise ToolError.parse_failure(f"Failed to parse response as JSON: {e}") from e


def _html_fields(outcome: HttpOutcome, rep: HtmlFragmentRepresentation) -> dict:
    content_type = outcome.header_map().get("content-type", "")
    soup = parse_html(outcome.body, content_type, outcome.charset)
    if rep.selector is None:
        return {"content": str(soup)}
    match = extract_fragment(soup, rep.selector, rep.anchor_id)
    return {
        "content": match.content(rep.multi_match),
        "match_count": match.match_count,
    }


def transform(
    outcome: HttpOutcome,
    representation: Representation,
    status_tolerance: StatusTolerance = StatusTolerance.LENIENT,
) -> FetchResult:
    """
    Produce the FetchResult for the requested representation.
    Under STRICT_2XX a non-2xx status fails before the body is looked at.
    """
    if status_tolerance is StatusTolerance.STRICT_2XX and not outcome.is_success:
        raise ToolError.http_error(outcome.status_code, outcome.status_text)

    fields: dict = {}
    if isinstance(representation, TextRepresentation):
        fields["content"] = decode_body(outcome)
    elif isinstance(representation, JsonRepresentation):
        fields["content"] = _json_content(outcome)
    elif isinstance(representation, BinaryRepresentation):
        fields["content"] = base64.b64encode(outcome.body).decode("ascii")
        fields["encoding"] = "base64"
    elif isinstance(representation, HtmlFragmentRepresentation):
        fields.update(_html_fields(outcome, representation))
    elif isinstance(representation, MetadataRepresentation):
        pass
    else:
        raise TypeError(f"Unsupported representation: {representation!r}")

    return FetchResult(
        status=outcome.status_code,
        status_text=outcome.status_text,
        headers=outcome.header_map(),
        url=outcome.final_url,
        **fields,
    )
