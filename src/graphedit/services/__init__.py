"""Service layer — the graph model and interface-facing services.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
