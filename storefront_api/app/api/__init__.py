"""
HTTP layer: shared dependencies (``deps``) and versioned routers.

A version subpackage such as ``v1`` exposes a top‑level ``router``
that includes all of its domain endpoints.
"""
