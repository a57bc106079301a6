"""
archdraft: conversational Mermaid diagram generation service.

Turns natural-language project descriptions into validated ERD, flowchart,
sequence and class diagrams by delegating to a generative text model.
"""

__version__ = "0.1.0"
