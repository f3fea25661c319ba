"""
Package entry point for Picoblog: ``python -m picoblog``.
"""

from .main import run_main


if __name__ == "__main__":
    run_main()
