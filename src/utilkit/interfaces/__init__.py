"""Interfaces (host boundary) for UTILKIT.

Defines the framework-free contracts the DOM facades are written against:
documents, elements, class-token lists, inline style declarations, events
and frame schedulers. No behavior lives here.

Dependency rule: this package is independent; do not import from any other
`utilkit.*` module. It may be imported by `utilkit.dom` and
`utilkit.adapters`.
"""
