"""
Boundary layer for external system integrations.

Handles all interactions with external systems (language models, database,
identity provider). Provides adapters implementing the core's interfaces.
"""
