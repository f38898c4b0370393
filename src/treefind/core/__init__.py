"""Shared error types and logging setup for treefind."""
