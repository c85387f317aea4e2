"""Headless browser session management for the Tailwind UI crawler."""

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from .config import BASE_URL, HEADLESS, SLOW_MO_MS
from .logging_setup import log


def base_url(path: str = "") -> str:
    """Return the absolute site URL for *path* (``/login`` → ``https://…/login``)."""
    return BASE_URL + path


class BrowserSession:
    """
    One Chromium browser with a single context and page.

    The crawler owns the session for the whole run.  ``close()`` may be
    called more than once; only the first call tears the browser down.
    Also usable as ``async with BrowserSession() as session: ...``.
    """

    def __init__(self, headless: bool = HEADLESS, slow_mo: int = SLOW_MO_MS) -> None:
        self.headless = headless
        self.slow_mo = slow_mo
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None
        self._closed = False

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("BrowserSession.start() has not been called")
        return self._page

    async def start(self) -> Page:
        log.debug("Launching chromium (headless=%s, slow_mo=%d)", self.headless, self.slow_mo)
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.headless,
            slow_mo=self.slow_mo,
        )
        self._context = await self._browser.new_context()
        self._page = await self._context.new_page()
        return self._page

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if self._browser is not None:
                await self._browser.close()
        finally:
            # The driver process must stop even when the browser already died.
            if self._playwright is not None:
                await self._playwright.stop()
        log.debug("Browser closed")

    async def __aenter__(self) -> "BrowserSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
