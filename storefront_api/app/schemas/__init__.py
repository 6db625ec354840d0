"""
Pydantic schema definitions for API payloads.

Each domain (users, products, cart, events, content...) defines its
own Pydantic models for request and response bodies.  The ``*Read``
models double as the records kept in the in‑memory tables; the
``*Create`` and ``*Update`` models are the validated insert and patch
shapes accepted by the services.
"""
