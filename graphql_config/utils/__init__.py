"""Shared helpers: errors, logging and console output."""
