#!/usr/bin/env python3
"""
Chain viewer - Package Entrypoint

This allows the chainview package to be executed directly:
    python3 -m chainview

It simply delegates execution to chainview.main.main().
"""

from chainview.main import main

if __name__ == "__main__":
    main()
