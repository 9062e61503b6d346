#!/usr/bin/env python3
"""
KWIC Search - Entry Point

Runs the keyword-in-context search from the command line.
"""

from kwic_app.main import main

if __name__ == "__main__":
    exit(main())
