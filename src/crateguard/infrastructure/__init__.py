"""Infrastructure layer — database engine, schema, and row access.

This layer depends on stdlib and SQLAlchemy.
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
