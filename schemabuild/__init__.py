"""schemabuild — build integration for JSON Schema code generation."""

__version__ = "0.1.0"
