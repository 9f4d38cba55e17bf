"""Issues infrastructure module."""
