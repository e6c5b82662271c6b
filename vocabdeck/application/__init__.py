"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Protocols: Interfaces for persistence and extraction collaborators
- Services: The card store owning the canonical collection
- Use Cases: Ingest, manual entry, training setup, unit management
"""
