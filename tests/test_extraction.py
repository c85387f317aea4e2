"""
Tests for catalog enumeration and per-section component extraction.
"""

import unittest
from unittest.mock import AsyncMock, MagicMock, call

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from tailwindui_crawler.config import BASE_URL, CODE_TOGGLE, VARIANT_SELECT
from tailwindui_crawler.errors import EnumerationError, ExtractionError
from tailwindui_crawler.extraction.components import (
    code_block_selector,
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
from tailwindui_crawler.models import SectionDescriptor, Variant

CATALOG_HTML = """
<html><body>
<div id="components">
  <a href="/components/application-ui/elements/buttons"><p>Buttons</p><p>12 components</p></a>
  <a href="/components/application-ui/forms/form-layouts"><p>Forms</p><p>8 components</p></a>
  <a href="/components/marketing/sections/heroes"><p>Hero
      Sections</p><p>0 components</p></a>
</div>
<div id="footer">
  <a href="/components/ecommerce"><p>Not a section</p><p>3 components</p></a>
</div>
</body></html>
"""

SECTION_HTML = """
<html><body>
<section id="component-1a">
  <h2><a href="#component-1a">Primary buttons</a></h2>
  <button x-ref="code">Code</button>
  <div x-ref="codeBlockhtml"><pre><code>&lt;button class="btn"&gt;Save&lt;/button&gt;</code></pre></div>
  <div x-ref="codeBlockreact"><pre><code>export default function Example() {}</code></pre></div>
</section>
<section id="component-2b">
  <h2><a href="#component-2b">Secondary buttons</a></h2>
  <button x-ref="code">Code</button>
  <div x-ref="codeBlockhtml"><pre><code>&lt;button&gt;Cancel&lt;/button&gt;</code></pre></div>
</section>
<section id="component-3c">
  <h2><a href="#component-3c">Button groups</a></h2>
  <div x-ref="codeBlockreact"><pre><code>export default function Group() {}</code></pre></div>
</section>
</body></html>
"""


# ---------------------------------------------------------------
# Catalog enumeration
# ---------------------------------------------------------------
class TestParseCount(unittest.TestCase):
    def test_leading_integer(self):
        self.assertEqual(parse_count("12 components"), 12)

    def test_leading_whitespace(self):
        self.assertEqual(parse_count("  8 components"), 8)

    def test_zero(self):
        self.assertEqual(parse_count("0 components"), 0)

    def test_non_numeric_raises(self):
        with self.assertRaises(ValueError):
            parse_count("components")

    def test_signed_count_raises(self):
        for text in ("-3 components", "+3 components"):
            with self.assertRaises(ValueError):
                parse_count(text)


class TestParseSections(unittest.TestCase):
    def test_entries_in_dom_order(self):
        sections = parse_sections(CATALOG_HTML, BASE_URL)
        self.assertEqual([s.title for s in sections], ["Buttons", "Forms", "Hero Sections"])

    def test_counts_parsed(self):
        sections = parse_sections(CATALOG_HTML, BASE_URL)
        self.assertEqual([s.components_count for s in sections], [12, 8, 0])

    def test_urls_absolute(self):
        sections = parse_sections(CATALOG_HTML, BASE_URL)
        self.assertEqual(
            sections[0].url,
            BASE_URL + "/components/application-ui/elements/buttons",
        )

    def test_entries_outside_catalog_ignored(self):
        titles = [s.title for s in parse_sections(CATALOG_HTML, BASE_URL)]
        self.assertNotIn("Not a section", titles)

    def test_components_start_empty(self):
        for section in parse_sections(CATALOG_HTML, BASE_URL):
            self.assertEqual(section.components, [])

    def test_empty_listing(self):
        html = '<html><body><div id="components"></div></body></html>'
        self.assertEqual(parse_sections(html, BASE_URL), [])

    def test_bad_count_raises(self):
        html = (
            '<div id="components"><a href="/components/x">'
            "<p>X</p><p>many components</p></a></div>"
        )
        with self.assertRaises(ValueError):
            parse_sections(html, BASE_URL)

    def test_negative_count_raises(self):
        html = (
            '<div id="components"><a href="/components/x">'
            "<p>X</p><p>-3 components</p></a></div>"
        )
        with self.assertRaises(ValueError):
            parse_sections(html, BASE_URL)


class TestEnumerateSections(unittest.IsolatedAsyncioTestCase):
    async def test_navigates_to_catalog_root(self):
        page = AsyncMock()
        page.content.return_value = CATALOG_HTML
        sections = await enumerate_sections(page)
        page.goto.assert_awaited_once_with(BASE_URL)
        self.assertEqual(len(sections), 3)

    async def test_parse_failure_raises_enumeration_error(self):
        page = AsyncMock()
        page.content.return_value = (
            '<div id="components"><a href="/components/x"><p>X</p><p>n/a</p></a></div>'
        )
        with self.assertRaises(EnumerationError):
            await enumerate_sections(page)

    async def test_navigation_failure_raises_enumeration_error(self):
        page = AsyncMock()
        page.goto.side_effect = PlaywrightError("net::ERR_CONNECTION_RESET")
        with self.assertRaises(EnumerationError):
            await enumerate_sections(page)


# ---------------------------------------------------------------
# Component parsing
# ---------------------------------------------------------------
class TestParseComponents(unittest.TestCase):
    def test_html_variant(self):
        records = parse_components(SECTION_HTML, Variant.HTML)
        self.assertEqual(
            [r.title for r in records],
            ["Primary buttons", "Secondary buttons"],
        )
        self.assertEqual(records[0].snippets["html"], '<button class="btn">Save</button>')

    def test_single_variant_key(self):
        for variant in (Variant.HTML, Variant.REACT):
            for record in parse_components(SECTION_HTML, variant):
                self.assertEqual(list(record.snippets), [variant.value])

    def test_react_variant_skips_missing_block(self):
        records = parse_components(SECTION_HTML, Variant.REACT)
        self.assertEqual([r.title for r in records], ["Primary buttons", "Button groups"])

    def test_strict_missing_block_raises(self):
        with self.assertRaises(ValueError):
            parse_components(SECTION_HTML, Variant.REACT, skip_missing_codeblock=False)

    def test_no_components(self):
        self.assertEqual(parse_components("<html></html>", Variant.VUE), [])

    def test_code_block_selector(self):
        self.assertEqual(code_block_selector(Variant.VUE), '[x-ref="codeBlockvue"]')


# ---------------------------------------------------------------
# Page interaction
# ---------------------------------------------------------------
def _block(has_toggle=True):
    block = AsyncMock()
    block.query_selector.return_value = AsyncMock() if has_toggle else None
    return block


class TestSelectVariant(unittest.IsolatedAsyncioTestCase):
    async def test_sets_value_and_dispatches_change(self):
        sel_a, sel_b = AsyncMock(), AsyncMock()
        page = AsyncMock()
        page.query_selector_all.return_value = [sel_a, sel_b]

        n = await select_variant(page, Variant.REACT)

        self.assertEqual(n, 2)
        page.query_selector_all.assert_awaited_once_with(VARIANT_SELECT)
        for sel in (sel_a, sel_b):
            self.assertEqual(sel.evaluate.await_args.args[1], "react")
            sel.dispatch_event.assert_awaited_once_with("change")


class TestRevealCodeBlocks(unittest.IsolatedAsyncioTestCase):
    async def test_clicks_every_toggle(self):
        blocks = [_block(), _block()]
        page = AsyncMock()
        page.query_selector_all.return_value = blocks

        clicked = await reveal_code_blocks(page, "Buttons")

        self.assertEqual(clicked, 2)
        for block in blocks:
            block.query_selector.assert_awaited_once_with(CODE_TOGGLE)
            block.query_selector.return_value.dispatch_event.assert_awaited_once_with("click")

    async def test_missing_toggle_skipped(self):
        page = AsyncMock()
        page.query_selector_all.return_value = [_block(), _block(has_toggle=False), _block()]
        self.assertEqual(await reveal_code_blocks(page, "Buttons"), 2)

    async def test_missing_toggle_strict_raises(self):
        page = AsyncMock()
        page.query_selector_all.return_value = [_block(has_toggle=False)]
        with self.assertRaises(ExtractionError) as ctx:
            await reveal_code_blocks(page, "Buttons", skip_missing_toggle=False)
        self.assertEqual(ctx.exception.section_title, "Buttons")


class TestExtractComponents(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.section = SectionDescriptor(
            title="Buttons",
            components_count=12,
            url=BASE_URL + "/components/application-ui/elements/buttons",
        )

    def _page(self):
        page = AsyncMock()
        # selectors for select_variant, then component blocks for reveal_code_blocks
        page.query_selector_all.side_effect = [[AsyncMock()], [_block(), _block()]]
        page.content.return_value = SECTION_HTML
        return page

    async def test_full_flow(self):
        page = self._page()

        records = await extract_components(page, self.section, Variant.HTML)

        self.assertEqual(len(records), 2)
        self.assertEqual(
            page.goto.await_args_list,
            [call(self.section.url), call(BASE_URL)],
        )
        waited = [c.args[0] for c in page.wait_for_selector.await_args_list]
        self.assertEqual(waited, [VARIANT_SELECT, CODE_TOGGLE, '[x-ref="codeBlockhtml"]'])

    async def test_selector_wait_is_bounded(self):
        page = self._page()
        await extract_components(page, self.section, Variant.HTML, selector_timeout_ms=1234)
        first = page.wait_for_selector.await_args_list[0]
        self.assertEqual(first.kwargs["timeout"], 1234)

    async def test_no_access_returns_empty(self):
        page = AsyncMock()
        page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout 10000ms exceeded")

        with self.assertLogs("tailwindui-crawler", level="WARNING"):
            records = await extract_components(page, self.section, Variant.HTML)

        self.assertEqual(records, [])
        page.query_selector_all.assert_not_awaited()

    async def test_late_timeout_is_extraction_error(self):
        page = self._page()
        page.wait_for_selector.side_effect = [
            None,
            PlaywrightTimeoutError("Timeout exceeded"),
        ]
        with self.assertRaises(ExtractionError) as ctx:
            await extract_components(page, self.section, Variant.HTML)
        self.assertEqual(ctx.exception.section_title, "Buttons")
        self.assertIsInstance(ctx.exception.cause, PlaywrightTimeoutError)

    async def test_navigation_error_is_extraction_error(self):
        page = AsyncMock()
        page.goto.side_effect = PlaywrightError("net::ERR_ABORTED")
        with self.assertRaises(ExtractionError):
            await extract_components(page, self.section, Variant.HTML)

    async def test_strict_missing_codeblock_is_extraction_error(self):
        page = self._page()
        with self.assertRaises(ExtractionError):
            await extract_components(
                page, self.section, Variant.REACT, skip_missing_codeblock=False,
            )


if __name__ == "__main__":
    unittest.main()
