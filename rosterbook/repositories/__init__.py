"""
Persistence adapters.

These modules encapsulate how the roster and user preferences are stored
(JSON files today). Services depend on the storage classes rather than
touching the files directly.
"""
