"""Shared enums and type aliases."""
