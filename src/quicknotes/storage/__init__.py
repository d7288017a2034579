"""SQLite storage for notes."""
