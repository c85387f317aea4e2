"""Output directory and JSON result writing."""

import json
from pathlib import Path

from ..config import INCOMPLETE_OUTPUT_TEMPLATE, OUTPUT_TEMPLATE
from ..logging_setup import log
from ..models import SectionDescriptor, Variant


def ensure_dir(path: Path) -> Path:
    """Create *path* (and parents) if missing and return it."""
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        log.info("Output directory created: %s", path)
    return path


def output_path(output_dir: Path, variant: Variant, incomplete: bool = False) -> Path:
    """Return the JSON file the run for *variant* is written to."""
    template = INCOMPLETE_OUTPUT_TEMPLATE if incomplete else OUTPUT_TEMPLATE
    return output_dir / template.format(variant=variant.value)


def write_sections(
    output_dir: Path,
    variant: Variant,
    sections: list[SectionDescriptor],
    incomplete: bool = False,
) -> Path:
    """Serialise *sections* to the run's output file and return its path."""
    ensure_dir(output_dir)
    path = output_path(output_dir, variant, incomplete=incomplete)
    log.info("Writing json file: %s", path)
    path.write_text(
        json.dumps([s.to_dict() for s in sections]),
        encoding="utf-8",
    )
    return path


def load_sections(path: Path) -> list[SectionDescriptor]:
    """Read a previously written output file back into section objects."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    return [SectionDescriptor.from_dict(item) for item in raw]
