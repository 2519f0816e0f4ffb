"""Elements matched by a CSS selector."""

from dataclasses import dataclass, field
from typing import Union

from .request_spec import MultiMatchPolicy


@dataclass
class FragmentMatch:
    """Outer markup of every matched element, in document order."""

    selector: str
    fragments: list[str] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.fragments)

    def content(self, policy: MultiMatchPolicy) -> Union[str, list[str]]:
        """Serialized matches. A single match is always a plain string."""
        if len(self.fragments) == 1:
            return self.fragments[0]
        if policy is MultiMatchPolicy.ENUMERATE:
            return list(self.fragments)
        return "\n".join(self.fragments)
