"""Infrastructure layer — database, persistence adapters, graph engine.

This layer depends on stdlib, the domain layer, and third-party libs
(SQLAlchemy, NetworkX). It must never import from services, commands,
or output.
"""
