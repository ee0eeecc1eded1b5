"""
Core utilities shared across the rosterbook package.

This package hosts configuration helpers (env vars, file paths) and the
logging setup used by the app factory and the maintenance scripts. Domain
and storage modules depend on these primitives instead of reading
os.environ directly.
"""
