"""Helpers for model-driven code generation: casing, YAML entities, templates and console output."""

__version__ = "0.1.0"