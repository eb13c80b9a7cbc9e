"""Domain layer — pure validators for album catalog fields.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
