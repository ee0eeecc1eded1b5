"""
Domain model for the roster: validated field types, records and the roster
container. Nothing in this package touches files or JSON text.
"""
