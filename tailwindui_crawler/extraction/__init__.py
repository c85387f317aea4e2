"""Extraction submodule – catalog sections and per-section components."""

from tailwindui_crawler.extraction.components import (
    extract_components,
    parse_components,
    reveal_code_blocks,
    select_variant,
)
from tailwindui_crawler.extraction.sections import (
    enumerate_sections,
    parse_count,
    parse_sections,
)

__all__ = [
    "enumerate_sections",
    "extract_components",
    "parse_components",
    "parse_count",
    "parse_sections",
    "reveal_code_blocks",
    "select_variant",
]
