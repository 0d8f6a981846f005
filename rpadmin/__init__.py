"""
RPNow Admin Console.

Interactive command-line console for administering an RPNow server:
list hosted RPs, inspect their URLs, and destroy an RP after a typed
confirmation challenge.
"""

__version__ = "0.1.0"
