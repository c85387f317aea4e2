"""Form-based login against tailwindui.com."""

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ..config import (
    EMAIL_INPUT,
    LOGIN_FAILED_MARKER,
    LOGIN_PATH,
    PASSWORD_INPUT,
    SUBMIT_BUTTON,
)
from ..errors import AuthError, InvalidCredentials
from ..logging_setup import log
from ..session import base_url


async def login_rejected(page: Page) -> bool:
    """Return True when the current page shows the "credentials rejected" text."""
    matches = await page.query_selector_all(f':text("{LOGIN_FAILED_MARKER}")')
    return bool(matches)


async def authenticate(page: Page, email: str, password: str) -> Page:
    """
    Log *page* in with *email* / *password* and return it.

    A single attempt is made:
      GET  /login
      fill email + password, click submit, wait for the response page

    Raises InvalidCredentials when the site answers with its rejection
    text, and AuthError for any browser failure on the way.  The password
    itself is never logged.
    """
    url = base_url(LOGIN_PATH)
    log.debug("Opening login page %s", url)
    try:
        await page.goto(url)
        await page.fill(EMAIL_INPUT, email)
        await page.fill(PASSWORD_INPUT, password)
        await page.click(SUBMIT_BUTTON)
        await page.wait_for_load_state()
        rejected = await login_rejected(page)
    except PlaywrightError as exc:
        raise AuthError(f"login form submission failed: {exc}") from exc

    if rejected:
        raise InvalidCredentials()

    log.info("Login successful as %s", email)
    return page
