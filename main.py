#!/usr/bin/env python3
"""
Main CLI for Google Fonts Metadata
==================================

Equivalent to the ``gf-metadata`` console script once the package is
installed (``pip install -e .``).
"""

from gf_metadata.cli import cli

if __name__ == "__main__":
    cli()
