"""Shared HTTP, environment and logging helpers."""
