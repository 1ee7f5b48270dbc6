"""Version module."""
