"""Utility subpackage for the Tailwind UI crawler."""

from .files import ensure_dir, load_sections, output_path, write_sections

__all__ = [
    "ensure_dir",
    "load_sections",
    "output_path",
    "write_sections",
]
