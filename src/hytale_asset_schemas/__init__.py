"""Cleaning and publishing of Hytale asset JSON schemas."""
