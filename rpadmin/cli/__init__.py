"""
Admin Console Module.

Interactive command-line console for an RPNow admin server.

Architecture:
- Console is a thin presentation layer
- All state lives on the server; every screen re-fetches
- Console calls the server via HTTP (httpx)
- Any server failure aborts the session with a non-zero exit

Usage:
    python cli.py --help
    python cli.py --base-url http://127.0.0.1:12789
"""
