"""Exception hierarchy for the Tailwind UI crawler."""


class CrawlerError(Exception):
    """Base class for every error the crawler reports to the operator."""


class ConfigError(CrawlerError):
    """Startup configuration is missing or blank (credentials)."""


class AuthError(CrawlerError):
    """Login did not produce an authenticated session."""


class InvalidCredentials(AuthError):
    """The site rejected the email/password pair."""

    def __init__(self, message: str = "invalid credentials") -> None:
        super().__init__(message)


class EnumerationError(CrawlerError):
    """The catalog listing could not be read."""


class ExtractionError(CrawlerError):
    """
    Unexpected failure while extracting one section.

    Carries the section title and the underlying exception so the
    operator sees which section broke the run.
    """

    def __init__(self, section_title: str, cause: BaseException | str) -> None:
        self.section_title = section_title
        self.cause = cause
        super().__init__(f"{section_title}: {cause}")
