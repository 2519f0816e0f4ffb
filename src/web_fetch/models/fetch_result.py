"""Results returned to tool callers."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FetchResult(BaseModel):
    """Representation-specific payload of fetch-url. Immutable once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: int
    status_text: str = Field(alias="statusText")
    headers: dict[str, str] = Field(default_factory=dict)
    url: str
    content: Optional[Union[str, list[str]]] = None
    encoding: Optional[str] = None
    match_count: Optional[int] = Field(default=None, alias="matchCount")


class StatusResult(BaseModel):
    """Result of check-status."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: int
    status_text: str = Field(alias="statusText")
    headers: dict[str, str] = Field(default_factory=dict)
    url: str
    is_available: bool = Field(alias="isAvailable")


class FragmentResult(BaseModel):
    """Result of extract-html-fragment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: int
    status_text: str = Field(alias="statusText")
    url: str
    selector: str
    match_count: int = Field(alias="matchCount", ge=1)
    html: Union[str, list[str]]
