"""Service layer: decoding operations returning ServiceResult.

Services may import from domain, engine, and models.
They must never import from commands or output.
"""
