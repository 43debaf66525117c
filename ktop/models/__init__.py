"""Data models for ktop."""
