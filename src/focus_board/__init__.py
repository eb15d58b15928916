"""
Focus Board: a minimal task tracker.

A FastAPI service exposing a small JSON API over a single ``todos`` table,
plus the static page that drives it. The ASGI app lives in
``focus_board.main:app``.
"""

__version__ = "0.1.0"
