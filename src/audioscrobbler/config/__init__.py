"""Configuration package: credential file, paths and persistence helpers."""
