"""Issues application module."""
