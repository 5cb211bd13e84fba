"""Configuration and factories."""
