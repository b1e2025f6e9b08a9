"""Entrypoints (inbound adapters) for UNDERBAR.

Expose the library to the outside world. Parse and validate inputs, call
library operations, and present results.
"""
