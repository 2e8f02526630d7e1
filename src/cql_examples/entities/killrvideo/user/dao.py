"""Data access for users and their credentials."""

from uuid import UUID

from cassandra import ConsistencyLevel
from cassandra.cqlengine.query import LWTException
from loguru import logger

from src.cql_examples.core.exceptions import EntityNotFoundError
from src.cql_examples.core.repositories.base import KeyspaceDao, now_millis

from .entity import User, UserCredentials
from .password_hashing import hash_password, password_matches
from .table import UserCredentialsTable, UserTable


class UserDao(KeyspaceDao):
    """Data-access layer for users.

    Creating a user and logging in span two tables (``users`` and
    ``user_credentials``) and involve password hashing, so both are exposed
    as single methods instead of raw inserts and selects.
    """

    def get(self, userid: UUID) -> User | None:
        """Simple selection by full primary key."""
        with self._tables(UserTable) as table:
            row = table.objects.filter(userid=userid).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_credentials(self, email: str) -> UserCredentials | None:
        with self._tables(UserCredentialsTable) as table:
            row = table.objects.filter(email=email).first()
        if row is None:
            return None
        return UserCredentials.model_validate(row, from_attributes=True)

    def get_by_email(self, email: str) -> User | None:
        credentials = self.get_credentials(email)
        if credentials is None:
            return None
        return self.get(credentials.userid)

    def create(self, user: User, password: str) -> bool:
        """Create the user and its credentials.

        Returns:
            ``True`` if the user was created, ``False`` if the email address is
            already taken.

        Raises:
            ValueError: If the user has no id or no email.
        """
        if user.userid is None or user.email is None:
            raise ValueError("id and email must not be null")

        try:
            # The user row goes first: credentials without a matching user are an
            # error state for login()
            if user.created_date is None:
                user = user.model_copy(update={"created_date": now_millis()})
            self._insert_user(user)
            if not self._insert_credentials_if_not_exists(user.email, password, user.userid):
                logger.info("Email {} is already taken, removing user {}", user.email, user.userid)
                self._delete_user(user.userid)
                return False
            return True
        except Exception:
            self._cleanup_failed_create(user)
            raise

    def login(self, email: str, password: str) -> User | None:
        """Return the authenticated user, or ``None`` if the credentials are invalid."""
        credentials = self.get_credentials(email)
        if credentials is None or not password_matches(password, credentials.password):
            return None
        user = self.get(credentials.userid)
        if user is None:
            raise EntityNotFoundError("User", credentials.userid)
        return user

    def _insert_user(self, user: User) -> None:
        with self._tables(UserTable) as table:
            table.create(**user.model_dump(exclude_none=True))

    def _insert_credentials_if_not_exists(self, email: str, password: str, userid: UUID) -> bool:
        credentials = UserCredentials(email=email, password=hash_password(password), userid=userid)
        with self._tables(UserCredentialsTable) as table:
            try:
                table.objects.if_not_exists().create(**credentials.model_dump())
            except LWTException:
                return False
        return True

    def _delete_user(self, userid: UUID) -> None:
        with self._tables(UserTable) as table:
            try:
                table.objects.filter(userid=userid).if_exists().consistency(
                    ConsistencyLevel.ANY
                ).delete()
            except LWTException:
                logger.debug("User {} was already gone", userid)

    def _delete_credentials(self, email: str, userid: UUID) -> None:
        with self._tables(UserCredentialsTable) as table:
            try:
                table.objects.filter(email=email).iff(userid=userid).consistency(
                    ConsistencyLevel.ANY
                ).delete()
            except LWTException:
                logger.debug("Credentials for {} belong to another user", email)

    def _cleanup_failed_create(self, user: User) -> None:
        for cleanup in (
            lambda: self._delete_user(user.userid),
            lambda: self._delete_credentials(user.email, user.userid),
        ):
            try:
                cleanup()
            except Exception:
                logger.exception("Cleanup after failed creation of user {} failed", user.userid)
