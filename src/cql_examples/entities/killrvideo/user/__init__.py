"""Entity package: User and UserCredentials."""

from .dao import UserDao
from .entity import User, UserCredentials
from .table import UserCredentialsTable, UserTable

__all__ = ["User", "UserCredentials", "UserDao", "UserTable", "UserCredentialsTable"]
