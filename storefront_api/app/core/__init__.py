"""
Core building blocks: the in‑memory store, the filter/sort engine,
record stitching and the ambient helpers (settings, logging, password
hashing and the completion client).
"""
