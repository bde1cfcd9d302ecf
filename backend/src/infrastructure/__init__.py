"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
(key-value storage, catalog sources) and application configuration.
"""
