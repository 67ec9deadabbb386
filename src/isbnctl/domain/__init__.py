"""Domain layer — identifier type, checksums, and range segmentation.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
