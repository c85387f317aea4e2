"""
tailwindui_crawler
==================
Python package for logging into tailwindui.com, walking every catalog
section and saving the component code for one variant (html, react or
vue) as JSON.

Package structure
-----------------
tailwindui_crawler/
├── __init__.py        – package init and public API
├── config.py          – URLs, selectors, timeouts, skip policies
├── errors.py          – exception hierarchy
├── logging_setup.py   – colorlog console + optional file logging
├── models.py          – Variant, SectionDescriptor, ComponentRecord
├── session.py         – Playwright browser session
├── crawler.py         – sequential Crawler driving one run
├── cli.py             – argparse CLI (``python -m tailwindui_crawler``)
├── auth/              – login form submission, password masking
├── extraction/        – catalog sections and per-section components
└── utils/             – output directory and JSON writing

Quick start
-----------
    import asyncio
    from pathlib import Path
    from tailwindui_crawler import Crawler, Variant

    crawler = Crawler(
        email="me@example.com",
        password="your_password",
        variant=Variant.REACT,
        output_dir=Path("output"),
    )
    asyncio.run(crawler.run())
"""

from .crawler import Crawler
from .auth import authenticate, mask_password
from .extraction import enumerate_sections, extract_components
from .models import ComponentRecord, SectionDescriptor, Variant

__all__ = [
    "Crawler",
    "authenticate",
    "mask_password",
    "enumerate_sections",
    "extract_components",
    "ComponentRecord",
    "SectionDescriptor",
    "Variant",
]
