"""Package setup for tailwindui_crawler."""

from setuptools import setup, find_packages

setup(
    name="tailwindui-crawler",
    version="1.0.0",
    description="Extracts Tailwind UI component code (html/react/vue) to JSON",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "playwright>=1.40.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "colorlog>=6.8.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tailwindui-crawler=tailwindui_crawler.cli:main",
        ],
    },
)
