"""Domain layer — bits, digit strings, messages, and conversions.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
