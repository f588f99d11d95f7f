"""
Core utilities shared across the back-office API.

This package hosts configuration, logging setup, password/token helpers and
the error taxonomy. Routers and services depend on these primitives instead
of reading os.environ or building HTTP error bodies themselves.
"""
