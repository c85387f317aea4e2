"""Password masking for log and console output."""


def mask_password(password: str, visible: int = 2) -> str:
    """
    Return *password* with everything but its last *visible* characters
    replaced by ``*``.

    Secrets shorter than ``2 * visible + 1`` characters are masked entirely,
    so a short password never has a meaningful fraction revealed.
    """
    if not password:
        return ""
    if visible <= 0 or len(password) <= visible * 2:
        return "*" * len(password)
    return "*" * (len(password) - visible) + password[-visible:]
