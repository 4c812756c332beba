#!/usr/bin/env python3
"""
Convenience shim to run modcatalog from a source checkout.
Usage: python modcatalog.py [CATALOG] [--config PATH] [--output FILE] [--seed N]
"""

from modcatalog.cli import main


if __name__ == "__main__":
    main()
