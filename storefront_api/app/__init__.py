"""
Application package initializer.

The package is organised into logical pieces: ``core`` holds the
in‑memory store, the query engine and the ambient helpers (config,
logging, security, completion client); ``schemas`` the pydantic
models; ``services`` the per‑domain business logic; and ``api`` the
versioned HTTP routers.
"""

from .main import app  # noqa: F401
