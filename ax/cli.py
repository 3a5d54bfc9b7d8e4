"""Command-line entry point for ax."""

import sys

from .dispatch import dispatch
from .logger import setup_logger


def main():
    """Main CLI entry point."""
    setup_logger()
    sys.exit(dispatch(sys.argv[1:]))


if __name__ == "__main__":
    main()
