"""Domain layer: pure utility functions.

This layer depends only on stdlib, pydantic, and the validation and
diagnostics modules. It must never import from runtime, commands, or config.
"""
