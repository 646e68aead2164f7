"""Domain layer: user entity, builder, factory, and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
