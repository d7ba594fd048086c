"""Service layer — runs checks and returns ServiceResult.

Services may import from domain, checks, and config.
They must never import from commands or output.
"""
