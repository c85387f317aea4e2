"""
Main entry point for the tailwindui_crawler package.

Allows running the crawler as: python -m tailwindui_crawler
"""

from tailwindui_crawler.cli import main

if __name__ == "__main__":
    main()
