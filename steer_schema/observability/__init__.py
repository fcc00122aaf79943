"""Logging helpers for schema derivation."""

from .logging import SchemaLogger

__all__ = ["SchemaLogger"]
