"""Domain layer — validated scalars, publish payloads, download projections.

This layer depends only on stdlib, pydantic and semantic_version.
It must never import from services, infrastructure, commands, or config.
"""
