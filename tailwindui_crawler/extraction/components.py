"""
Per-section component extraction.

A section page lists its components as ``<section id="component-…">``
blocks.  The code for each block is only rendered after the page-wide
variant selector has been switched and the block's "code" toggle has
been clicked, so extraction drives the page first and parses the
rendered HTML afterwards.
"""

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import (
    BASE_URL,
    BS4_PARSER,
    CODE_BLOCK_TEMPLATE,
    CODE_TOGGLE,
    COMPONENT_BLOCK,
    COMPONENT_TITLE,
    ELEMENT_WAIT_TIMEOUT_MS,
    SELECTOR_TIMEOUT_MS,
    SKIP_MISSING_CODEBLOCK,
    SKIP_MISSING_TOGGLE,
    VARIANT_SELECT,
)
from ..errors import ExtractionError
from ..logging_setup import log
from ..models import ComponentRecord, SectionDescriptor, Variant

_SET_VALUE_JS = "(el, value) => { el.value = value; }"


def code_block_selector(variant: Variant) -> str:
    return CODE_BLOCK_TEMPLATE.format(variant=variant.value)


def parse_components(
    html: str,
    variant: Variant,
    skip_missing_codeblock: bool = SKIP_MISSING_CODEBLOCK,
) -> list[ComponentRecord]:
    """
    Read every component block of a rendered section page.

    Returns one record per block, in DOM order, holding the block title
    and the text of its *variant* code block.  A block without that code
    block is skipped, or raises ValueError when *skip_missing_codeblock*
    is False.
    """
    soup = BeautifulSoup(html, BS4_PARSER)
    selector = code_block_selector(variant)
    records: list[ComponentRecord] = []
    for block in soup.select(COMPONENT_BLOCK):
        title_el = block.select_one(COMPONENT_TITLE)
        if title_el is None:
            raise ValueError(f"component {block.get('id')!r} has no title")
        title = " ".join(title_el.get_text().split())

        code_el = block.select_one(selector)
        if code_el is None:
            if not skip_missing_codeblock:
                raise ValueError(f"component {title!r} has no {variant.value} code block")
            log.debug("No %s code block for %r – skipped", variant.value, title)
            continue

        records.append(ComponentRecord.for_variant(title, variant, code_el.get_text()))
    return records


async def select_variant(page: Page, variant: Variant) -> int:
    """
    Point every variant selector on *page* at *variant* and fire a
    ``change`` event so the page re-renders the matching snippets.

    Returns the number of selectors updated.
    """
    selectors = await page.query_selector_all(VARIANT_SELECT)
    for el in selectors:
        await el.evaluate(_SET_VALUE_JS, variant.value)
        await el.dispatch_event("change")
    return len(selectors)


async def reveal_code_blocks(
    page: Page,
    section_title: str,
    skip_missing_toggle: bool = SKIP_MISSING_TOGGLE,
) -> int:
    """Click the "code" toggle of every component block; returns clicks made."""
    clicked = 0
    for block in await page.query_selector_all(COMPONENT_BLOCK):
        toggle = await block.query_selector(CODE_TOGGLE)
        if toggle is None:
            if not skip_missing_toggle:
                raise ExtractionError(section_title, "component without code toggle")
            log.debug("Component without code toggle in %r – skipped", section_title)
            continue
        await toggle.dispatch_event("click")
        clicked += 1
    return clicked


async def _extract(
    page: Page,
    section: SectionDescriptor,
    variant: Variant,
    skip_missing_toggle: bool,
    skip_missing_codeblock: bool,
    selector_timeout_ms: int,
    wait_timeout_ms: int,
) -> list[ComponentRecord]:
    await page.goto(section.url)

    # Accounts without access to a section get a page with no selector.
    try:
        await page.wait_for_selector(VARIANT_SELECT, timeout=selector_timeout_ms)
    except PlaywrightTimeoutError:
        log.warning("You do not have access to this section's components: %s", section.url)
        return []

    n = await select_variant(page, variant)
    log.debug("Switched %d selector(s) to %s", n, variant.value)

    await page.wait_for_selector(CODE_TOGGLE, timeout=wait_timeout_ms)
    await reveal_code_blocks(page, section.title, skip_missing_toggle)

    await page.wait_for_selector(code_block_selector(variant), timeout=wait_timeout_ms)
    components = parse_components(await page.content(), variant, skip_missing_codeblock)

    await page.goto(BASE_URL)
    return components


async def extract_components(
    page: Page,
    section: SectionDescriptor,
    variant: Variant,
    *,
    skip_missing_toggle: bool = SKIP_MISSING_TOGGLE,
    skip_missing_codeblock: bool = SKIP_MISSING_CODEBLOCK,
    selector_timeout_ms: int = SELECTOR_TIMEOUT_MS,
    wait_timeout_ms: int = ELEMENT_WAIT_TIMEOUT_MS,
) -> list[ComponentRecord]:
    """
    Navigate to *section* and return its components in the *variant* flavour.

    Returns ``[]`` when the section's variant selector does not appear
    within *selector_timeout_ms* (no access for this account).  Any other
    failure is raised as ExtractionError naming the section.
    """
    try:
        return await _extract(
            page,
            section,
            variant,
            skip_missing_toggle,
            skip_missing_codeblock,
            selector_timeout_ms,
            wait_timeout_ms,
        )
    except ExtractionError:
        raise
    except (PlaywrightError, ValueError) as exc:
        raise ExtractionError(section.title, exc) from exc
