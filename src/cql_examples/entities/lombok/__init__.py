"""Entities of the ``lombok`` keyspace: mutable and immutable pydantic products."""
