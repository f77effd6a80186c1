"""
HTTP routes. Each module exposes a ``router``.
"""
