"""Entities of the ``record`` keyspace: a frozen dataclass product."""
