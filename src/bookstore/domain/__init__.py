"""Domain layer — entities, tiers, and capability strategies.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
