"""Tests for argument validation."""

import pytest

from web_fetch.models import (
    BinaryRepresentation,
    ErrorKind,
    HtmlFragmentRepresentation,
    JsonRepresentation,
    MetadataRepresentation,
    MultiMatchPolicy,
    StatusTolerance,
    TextRepresentation,
    ToolError,
)
from web_fetch.tools.validate_tool import (
    normalize_headers,
    validate_extract_args,
    validate_fetch_args,
    validate_status_args,
)


def test_fetch_defaults():
    spec = validate_fetch_args({"url": "https://example.com/a"})
    assert spec.url == "https://example.com/a"
    assert spec.method == "GET"
    assert spec.follow_redirects is True
    assert spec.timeout_ms is None
    assert spec.headers == {}
    assert isinstance(spec.representation, TextRepresentation)
    assert spec.status_tolerance is StatusTolerance.LENIENT


@pytest.mark.parametrize(
    "response_type,expected",
    [
        ("text", TextRepresentation),
        ("json", JsonRepresentation),
        ("binary", BinaryRepresentation),
        ("html-fragment", HtmlFragmentRepresentation),
    ],
)
def test_fetch_response_types(response_type, expected):
    spec = validate_fetch_args({"url": "http://x.test/", "responseType": response_type})
    assert isinstance(spec.representation, expected)


def test_fragment_selector_only_used_for_html_fragment():
    spec = validate_fetch_args(
        {"url": "http://x.test/", "responseType": "text", "fragmentSelector": "h1"}
    )
    assert isinstance(spec.representation, TextRepresentation)

    spec = validate_fetch_args(
        {"url": "http://x.test/", "responseType": "html-fragment", "fragmentSelector": "h1"}
    )
    assert spec.representation.selector == "h1"
    assert spec.representation.multi_match is MultiMatchPolicy.CONCATENATE


@pytest.mark.parametrize("selector", ["", "   ", "\t\n"])
def test_blank_fragment_selector_means_whole_document(selector):
    spec = validate_fetch_args(
        {"url": "http://x.test/", "responseType": "html-fragment", "fragmentSelector": selector}
    )
    assert spec.representation.selector is None


def test_fragment_selector_is_stripped():
    spec = validate_fetch_args(
        {"url": "http://x.test/", "responseType": "html-fragment", "fragmentSelector": "  h1 "}
    )
    assert spec.representation.selector == "h1"


@pytest.mark.parametrize("url",["not a url", "/relative/path", "example.com", "", "mailto:a@b.c"])
def test_rejects_non_absolute_url(url):
    with pytest.raises(ToolError) as exc:
        validate_fetch_args({"url": url})
    assert exc.value.kind is ErrorKind.INVALID_INPUT
    assert "url" in exc.value.message


def test_missing_url():
    with pytest.raises(ToolError) as exc:
        validate_fetch_args({})
    assert exc.value.kind is ErrorKind.INVALID_INPUT
    assert "url" in exc.value.message


@pytest.mark.parametrize("timeout", [0, -5, -0.1])
def test_rejects_non_positive_timeout(timeout):
    with pytest.raises(ToolError) as exc:
        validate_fetch_args({"url": "http://x.test/", "timeout": timeout})
    assert exc.value.kind is ErrorKind.INVALID_INPUT
    assert "timeout" in exc.value.message


def test_accepts_positive_timeout():
    assert validate_fetch_args({"url": "http://x.test/", "timeout": 1500}).timeout_ms == 1500


def test_method_is_case_insensitive():
    assert validate_fetch_args({"url": "http://x.test/", "method": "patch"}).method == "PATCH"


def test_rejects_unknown_method():
    with pytest.raises(ToolError) as exc:
        validate_fetch_args({"url": "http://x.test/", "method": "TRACE"})
    assert exc.value.kind is ErrorKind.INVALID_INPUT


def test_rejects_unknown_response_type():
    with pytest.raises(ToolError):
        validate_fetch_args({"url": "http://x.test/", "responseType": "xml"})


def test_rejects_non_string_header_values():
    with pytest.raises(ToolError):
        validate_fetch_args({"url": "http://x.test/", "headers": {"X-Count": 3}})


def test_rejects_non_object_arguments():
    with pytest.raises(ToolError) as exc:
        validate_fetch_args(["http://x.test/"])
    assert exc.value.kind is ErrorKind.INVALID_INPUT


def test_headers_last_write_wins_case_insensitively():
    headers = normalize_headers({"Accept": "text/html", "X-A": "1", "accept": "application/json"})
    assert headers == {"X-A": "1", "accept": "application/json"}


def test_status_forces_head():
    spec = validate_status_args({"url": "http://x.test/", "method": "POST", "timeout": 10})
    assert spec.method == "HEAD"
    assert spec.timeout_ms == 10
    assert isinstance(spec.representation, MetadataRepresentation)


def test_extract_args():
    spec = validate_extract_args(
        {"url": "http://x.test/", "selector": " div.content ", "anchorId": "main", "method": "post"}
    )
    assert spec.method == "POST"
    assert spec.status_tolerance is StatusTolerance.STRICT_2XX
    rep = spec.representation
    assert rep.selector == "div.content"
    assert rep.anchor_id == "main"
    assert rep.multi_match is MultiMatchPolicy.ENUMERATE


def test_extract_restricts_methods():
    with pytest.raises(ToolError) as exc:
        validate_extract_args({"url": "http://x.test/", "selector": "h1", "method": "PUT"})
    assert exc.value.kind is ErrorKind.INVALID_INPUT


@pytest.mark.parametrize("args", [{"url": "http://x.test/"}, {"url": "http://x.test/", "selector": "  "}])
def test_extract_requires_selector(args):
    with pytest.raises(ToolError) as exc:
        validate_extract_args(args)
    assert "selector" in exc.value.message


def test_extract_blank_anchor_is_ignored():
    spec = validate_extract_args({"url": "http://x.test/", "selector": "h1", "anchorId": ""})
    assert spec.representation.anchor_id is None
