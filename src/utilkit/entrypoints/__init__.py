"""Entrypoints (inbound adapters) for UTILKIT.

Expose the library to the outside world through the ``utilkit`` command-line
interface. Parse and validate inputs, call the library functions, and present
results.

Dependency rule: may import any `utilkit` module; nothing in the library
imports this package.
"""
