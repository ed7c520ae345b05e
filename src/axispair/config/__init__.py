"""Configuration discovery and loading for axispair."""
