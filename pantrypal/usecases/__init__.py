"""Use-case layer for orchestrating GUI workflows.

Each module coordinates domain objects and ports (session, user store,
settings storage) without touching SQL or widgets directly.
"""
