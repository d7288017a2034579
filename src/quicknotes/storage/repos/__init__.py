"""Row-level repository functions."""
