"""Data models for catalog sections and the components extracted from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Variant(str, Enum):
    """Code flavour requested for a run."""

    HTML = "html"
    REACT = "react"
    VUE = "vue"

    @classmethod
    def choices(cls) -> list[str]:
        return [v.value for v in cls]


@dataclass(frozen=True)
class ComponentRecord:
    """One component's title and its snippet, keyed by variant name."""

    title: str
    snippets: dict[str, str]

    @classmethod
    def for_variant(cls, title: str, variant: Variant, code: str) -> "ComponentRecord":
        return cls(title=title, snippets={variant.value: code})

    def to_dict(self) -> dict:
        return {"title": self.title, "codeblocks": dict(self.snippets)}

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentRecord":
        return cls(title=data["title"], snippets=dict(data["codeblocks"]))


@dataclass
class SectionDescriptor:
    """
    A catalog section as listed on the landing page.

    ``components`` stays empty until the crawler attaches the extracted
    records.  A section is identified by its ``url``.
    """

    title: str
    components_count: int
    url: str
    components: list[ComponentRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "componentsCount": self.components_count,
            "url": self.url,
            "components": [c.to_dict() for c in self.components],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SectionDescriptor":
        return cls(
            title=data["title"],
            components_count=int(data["componentsCount"]),
            url=data["url"],
            components=[ComponentRecord.from_dict(c) for c in data.get("components", [])],
        )
