"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer. It handles all external concerns:

- Persistence (partition store backends, record schemas, repositories)
- External services (AI card generation)

This layer depends on domain and application layers,
but they do not depend on it.
"""
