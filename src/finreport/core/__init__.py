"""Core settings and logging setup."""
