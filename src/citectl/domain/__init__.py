"""Domain layer — value objects, laws, and the issuer.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
