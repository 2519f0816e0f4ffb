"""Classified failures raised by the fetch pipeline."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure classes. Every failed tool call maps to exactly one."""

    INVALID_INPUT = "InvalidInput"
    TRANSPORT_FAILURE = "TransportFailure"
    HTTP_ERROR = "HttpError"
    PARSE_FAILURE = "ParseFailure"
    NO_MATCH = "NoMatch"
    ANCHOR_NOT_FOUND = "AnchorNotFound"


class ToolError(Exception):
    """A failure of one tool call, carried up to the error mapper."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"ToolError({self.kind.value}, {self.message!r})"

    @classmethod
    def invalid_input(cls, message: str) -> "ToolError":
        return cls(ErrorKind.INVALID_INPUT, message)

    @classmethod
    def transport_failure(cls, message: str) -> "ToolError":
        return cls(ErrorKind.TRANSPORT_FAILURE, message)

    @classmethod
    def http_error(cls, status_code: int, status_text: str) -> "ToolError":
        text = f"HTTP error {status_code}"
        if status_text:
            text += f": {status_text}"
        return cls(ErrorKind.HTTP_ERROR, text, status_code=status_code)

    @classmethod
    def parse_failure(cls, message: str) -> "ToolError":
        return cls(ErrorKind.PARSE_FAILURE, message)

    @classmethod
    def no_match(cls, selector: str) -> "ToolError":
        return cls(ErrorKind.NO_MATCH, f"No elements found matching selector: {selector}")

    @classmethod
    def anchor_not_found(cls, anchor_id: str) -> "ToolError":
        return cls(
            ErrorKind.ANCHOR_NOT_FOUND,
            f"Anchor element with id '{anchor_id}' not found",
        )
