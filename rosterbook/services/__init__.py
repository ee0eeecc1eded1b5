"""
High-level use cases for rosterbook.

Service modules orchestrate the storage adapters to implement the roster
workflow (load or initialise, add, replace, remove, save). Routers and
scripts call these services instead of touching the JSON files directly.
"""
