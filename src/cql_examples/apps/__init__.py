"""Runnable example applications, one module per keyspace."""
