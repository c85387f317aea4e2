"""
Sequential crawler for the Tailwind UI component catalog.

Login → enumerate sections → extract each section's components → write
JSON.  One browser page is used for the whole run and every step is
awaited in turn; the browser is closed exactly once, whichever way the
run ends.

Failure policy
--------------
* Login or catalog enumeration failure: nothing is written.
* A section whose variant selector never appears (no access) keeps an
  empty component list and the run continues.
* Any other extraction failure stops the run.  Sections finished before
  the failing one are written to ``incomplete-<variant>.json`` and the
  ExtractionError is re-raised.
"""

from pathlib import Path

from tqdm import tqdm

from tailwindui_crawler.auth.login import authenticate
from tailwindui_crawler.config import (
    BASE_URL,
    ELEMENT_WAIT_TIMEOUT_MS,
    HEADLESS,
    SELECTOR_TIMEOUT_MS,
    SKIP_MISSING_CODEBLOCK,
    SKIP_MISSING_TOGGLE,
    SLOW_MO_MS,
)
from tailwindui_crawler.errors import ExtractionError
from tailwindui_crawler.extraction.components import extract_components
from tailwindui_crawler.extraction.sections import enumerate_sections
from tailwindui_crawler.logging_setup import log
from tailwindui_crawler.models import SectionDescriptor, Variant
from tailwindui_crawler.session import BrowserSession
from tailwindui_crawler.utils.files import write_sections


class Crawler:
    """
    Drives one run for a single code variant.
    """

    def __init__(
        self,
        email: str,
        password: str,
        variant: Variant,
        output_dir: Path,
        headless: bool = HEADLESS,
        slow_mo: int = SLOW_MO_MS,
        skip_missing_toggle: bool = SKIP_MISSING_TOGGLE,
        skip_missing_codeblock: bool = SKIP_MISSING_CODEBLOCK,
        selector_timeout_ms: int = SELECTOR_TIMEOUT_MS,
        wait_timeout_ms: int = ELEMENT_WAIT_TIMEOUT_MS,
        progress: bool = True,
    ) -> None:
        self.email = email
        self.password = password
        self.variant = variant
        self.output_dir = output_dir
        self.skip_missing_toggle = skip_missing_toggle
        self.skip_missing_codeblock = skip_missing_codeblock
        self.selector_timeout_ms = selector_timeout_ms
        self.wait_timeout_ms = wait_timeout_ms
        self.progress = progress
        self.session = BrowserSession(headless=headless, slow_mo=slow_mo)

        self.sections: list[SectionDescriptor] = []
        self.completed: list[SectionDescriptor] = []
        self._stats = {"sections": 0, "empty": 0, "components": 0}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def run(self) -> Path:
        """Crawl the catalog and return the path of the written JSON file."""
        log.info("Output directory : %s", self.output_dir.resolve())
        log.info("Variant          : %s", self.variant.value)

        failure: ExtractionError | None = None
        try:
            page = await self.session.start()

            log.info("Logging in to %s ..", BASE_URL)
            await authenticate(page, self.email, self.password)

            log.info("Fetching sections ..")
            self.sections = await enumerate_sections(page)
            total = sum(s.components_count for s in self.sections)
            log.info("%d sections found (%d components)", len(self.sections), total)

            try:
                await self._extract_all(page)
            except ExtractionError as exc:
                failure = exc
        finally:
            await self.session.close()

        if failure is not None:
            log.error(
                "Extracting components failed: %s (%s)",
                failure.section_title, failure.cause,
            )
            try:
                write_sections(self.output_dir, self.variant, self.completed, incomplete=True)
            except OSError as exc:
                log.error("Could not write incomplete output: %s", exc)
            raise failure

        path = write_sections(self.output_dir, self.variant, self.completed)
        log.info(
            "Done! sections=%d  components=%d  empty=%d",
            self._stats["sections"],
            self._stats["components"],
            self._stats["empty"],
        )
        return path

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _extract_all(self, page) -> None:
        """Extract every enumerated section in order, with a progress bar."""
        bar = tqdm(
            total=len(self.sections),
            desc="Sections",
            unit="section",
            dynamic_ncols=True,
            disable=not self.progress,
        )
        try:
            for i, section in enumerate(self.sections, 1):
                log.info(
                    "[%d/%d] fetching %s components: %s (%d components)",
                    i, len(self.sections), self.variant.value,
                    section.title, section.components_count,
                )
                section.components = await extract_components(
                    page,
                    section,
                    self.variant,
                    skip_missing_toggle=self.skip_missing_toggle,
                    skip_missing_codeblock=self.skip_missing_codeblock,
                    selector_timeout_ms=self.selector_timeout_ms,
                    wait_timeout_ms=self.wait_timeout_ms,
                )
                self.completed.append(section)
                self._stats["sections"] += 1
                self._stats["components"] += len(section.components)
                if not section.components:
                    self._stats["empty"] += 1

                bar.update(1)
                bar.set_postfix(
                    components=self._stats["components"],
                    empty=self._stats["empty"],
                )
        finally:
            bar.close()
