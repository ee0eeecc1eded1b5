"""rosterbook: JSON-backed roster of people and students."""
