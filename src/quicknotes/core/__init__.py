"""Settings, display configuration and logging."""
