"""Authentication submodule – login and password masking."""

from tailwindui_crawler.auth.login import authenticate, login_rejected
from tailwindui_crawler.auth.password import mask_password

__all__ = [
    "authenticate",
    "login_rejected",
    "mask_password",
]
