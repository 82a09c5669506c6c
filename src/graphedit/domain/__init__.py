"""Domain layer — graph types, ID rules, and label validation.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
