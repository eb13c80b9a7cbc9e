"""Service layer — validation operations returning ServiceResult.

Services may import from domain and config (models, logging).
They must never import from commands or output.
"""
