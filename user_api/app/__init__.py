"""
Application package initializer.

The project is split into a persistence layer (``core.db``), a service
layer (``services``) and an HTTP layer (``api``).  Each layer only
depends on the one below it, so the store can be swapped between the
file‑backed and in‑memory variants without touching service logic.
"""

from .main import app  # noqa: F401
