"""
Infrastructure layer.

Adapters for the application protocols (repositories, extraction) and the
FastAPI HTTP surface.
"""
