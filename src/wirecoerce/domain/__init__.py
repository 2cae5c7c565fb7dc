"""Domain layer: type descriptors and coercion errors.

This layer depends only on stdlib and pydantic.
It must never import from engine, services, commands, or config.
"""
