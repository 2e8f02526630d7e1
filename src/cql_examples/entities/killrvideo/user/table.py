"""User and credentials table models."""

from cassandra.cqlengine import columns
from cassandra.cqlengine.models import Model


class UserTable(Model):
    __table_name__ = "users"

    userid = columns.UUID(partition_key=True)
    firstname = columns.Text()
    lastname = columns.Text()
    email = columns.Text()
    created_date = columns.DateTime()


class UserCredentialsTable(Model):
    __table_name__ = "user_credentials"

    email = columns.Text(partition_key=True)
    password = columns.Text()
    userid = columns.UUID()
