"""
Service layer abstraction.

Each service encapsulates business logic for a domain on top of the
tables of a ``Store``.  Services are cheap to construct: the routes
build them per request from the store attached to the application, and
tests build them directly around a store of their own.
"""
