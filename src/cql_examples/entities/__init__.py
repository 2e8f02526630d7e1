"""Entity packages of the example applications.

Each entity package keeps everything about one concept together:
- entity.py: Domain model handed to and returned by the DAO
- table.py: cqlengine model describing the persisted row
- dao.py: Data access bound to a keyspace
"""
