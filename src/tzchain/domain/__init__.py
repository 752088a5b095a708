"""Domain layer — zone rules, offset arithmetic, civil-time projection.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
