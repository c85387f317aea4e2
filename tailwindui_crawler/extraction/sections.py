"""Catalog enumeration: the landing page's section list."""

import re
import urllib.parse

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ..config import BASE_URL, BS4_PARSER, SECTION_LINK
from ..errors import EnumerationError
from ..logging_setup import log
from ..models import SectionDescriptor

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def parse_count(text: str) -> int:
    """
    Parse the leading integer of *text* (``"12 components"`` → 12).

    Raises ValueError when *text* does not start with a number.
    """
    m = _LEADING_INT_RE.match(text)
    if not m:
        raise ValueError(f"invalid component count: {text!r}")
    return int(m.group(1))


def _text(el) -> str:
    return " ".join(el.get_text().split())


def parse_sections(html: str, base: str = BASE_URL) -> list[SectionDescriptor]:
    """
    Turn the catalog landing page into section descriptors, in DOM order.

    Each ``#components a[href^="/components"]`` entry holds the section
    title in its first ``<p>`` and the component count in its second.
    """
    soup = BeautifulSoup(html, BS4_PARSER)
    sections: list[SectionDescriptor] = []
    for el in soup.select(SECTION_LINK):
        title_el = el.select_one("p:nth-child(1)")
        count_el = el.select_one("p:nth-child(2)")
        if title_el is None or count_el is None:
            raise ValueError(f"catalog entry without title/count: {el.get('href')!r}")
        sections.append(SectionDescriptor(
            title=_text(title_el),
            components_count=parse_count(_text(count_el)),
            url=urllib.parse.urljoin(base, el["href"]),
        ))
    return sections


async def enumerate_sections(page: Page, base: str = BASE_URL) -> list[SectionDescriptor]:
    """Open the catalog root on *page* and return every section listed there."""
    try:
        await page.goto(base)
        html = await page.content()
    except PlaywrightError as exc:
        raise EnumerationError(f"could not load catalog page {base}: {exc}") from exc

    try:
        sections = parse_sections(html, base)
    except ValueError as exc:
        raise EnumerationError(str(exc)) from exc

    log.debug("Parsed %d catalog entries from %s", len(sections), base)
    return sections
