"""
chainview
---------
Read-only curses viewer for an options chain snapshot.

Run it with:
    python3 -m chainview sample-options-chain.json
or embed the pieces:
    from chainview.chain import load_chain
    from chainview.app import ChainViewApp
"""

__version__ = "1.0.0"
