"""Cassandra object-mapper example applications.

This package contains small, self-contained programs that persist and read back
records through the cqlengine object mapper shipped with the DataStax Python
driver. Each example owns a keyspace and a handful of entity packages.
"""

__version__ = "0.1.0"
