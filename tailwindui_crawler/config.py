"""Configuration constants for the Tailwind UI crawler."""

import os

BASE_URL = "https://tailwindui.com"
LOGIN_PATH = "/login"
DEFAULT_OUTPUT = "output"

# Credentials are only ever read from the environment
EMAIL_ENV = "TAILWINDUI_EMAIL"
PASSWORD_ENV = "TAILWINDUI_PASSWORD"

# Set TAILWINDUI_HEADLESS=0 to watch the browser work
HEADLESS = os.environ.get("TAILWINDUI_HEADLESS", "1").strip().lower() not in ("0", "false", "no")
SLOW_MO_MS = 0

# The variant selector is missing when the account has no access to a
# section, so this wait is bounded.  Every other element wait uses
# ELEMENT_WAIT_TIMEOUT_MS, where 0 means "wait as long as it takes".
# The CLI reads an override from WAIT_TIMEOUT_ENV.
SELECTOR_TIMEOUT_MS = 10 * 1000
ELEMENT_WAIT_TIMEOUT_MS = 0
WAIT_TIMEOUT_ENV = "TAILWINDUI_WAIT_TIMEOUT_MS"

# Per-component skip policies; --strict turns both off
SKIP_MISSING_TOGGLE = True
SKIP_MISSING_CODEBLOCK = True

# Login form
EMAIL_INPUT = '[name="email"]'
PASSWORD_INPUT = '[name="password"]'
SUBMIT_BUTTON = '[type="submit"]'
LOGIN_FAILED_MARKER = "These credentials do not match our records"

# Catalog landing page: one anchor per section, title and count in <p> children
SECTION_LINK = '#components [href^="/components"]'

# Section page
VARIANT_SELECT = '[x-model="activeSnippet"]'
COMPONENT_BLOCK = 'section[id^="component-"]'
COMPONENT_TITLE = "h2 a"
CODE_TOGGLE = '[x-ref="code"]'
CODE_BLOCK_TEMPLATE = '[x-ref="codeBlock{variant}"]'

# BeautifulSoup parser backend
BS4_PARSER = "lxml"

OUTPUT_TEMPLATE = "{variant}.json"
INCOMPLETE_OUTPUT_TEMPLATE = "incomplete-{variant}.json"
