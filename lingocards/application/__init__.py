"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to the caller.

This layer contains:
- Use Cases: Deck and card stores, history, settings, generation, reviews
- DTOs: Data transfer objects for input/output
- Ports: Interfaces for the store, repositories and the card generator
"""
