"""Extract tool - parse HTML and select fragments with CSS selectors."""

import logging
from typing import Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup
from soupsieve import SelectorSyntaxError

from ..models.fragment_match import FragmentMatch
from ..models.tool_error import ToolError

logger = logging.getLogger(__name__)


def parse_html(
    markup: bytes | str,
    content_type: str = "",
    charset: Optional[str] = None,
) -> BeautifulSoup:
    """
    Build a queryable document tree.
    XML content types use the XML parser, everything else lxml's HTML parser.
    """
    ctype = (content_type or "").lower()
    features = "xml" if "xml" in ctype and "html" not in ctype else "lxml"
    kwargs = {}
    if isinstance(markup, bytes) and charset:
        kwargs["from_encoding"] = charset
    try:
        return BeautifulSoup(markup, features, **kwargs)
    except ParserRejectedMarkup as e:
        raise ToolError.parse_failure(f"Failed to parse response as HTML: {e}") from e


def extract_fragment(
    soup: BeautifulSoup,
    selector: str,
    anchor_id: Optional[str] = None,
) -> FragmentMatch:
    """
    Apply selector to the document.
    anchor_id only gates on presence; it does not narrow the selection.
    """
    if anchor_id is not None and soup.find(id=anchor_id) is None:
        raise ToolError.anchor_not_found(anchor_id)

    try:
        elements = soup.select(selector)
    except SelectorSyntaxError as e:
        raise ToolError.invalid_input(f"Invalid CSS selector '{selector}': {e}") from e

    if not elements:
        raise ToolError.no_match(selector)

    logger.debug("Selector %r matched %d element(s)", selector, len(elements))
    return FragmentMatch(selector=selector, fragments=[str(el) for el in elements])
