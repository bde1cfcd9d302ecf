"""
Application Layer - Use cases and stateful services.

This layer orchestrates domain objects and coordinates application logic.
It depends on the domain layer and its ports rather than on concrete
storage or catalog adapters.
"""
