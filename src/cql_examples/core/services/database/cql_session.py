"""Cluster connection and session scope shared by the example applications."""

from collections.abc import Iterator
from contextlib import contextmanager

from cassandra.auth import PlainTextAuthProvider
from cassandra.cluster import EXEC_PROFILE_DEFAULT, Cluster, ExecutionProfile, Session
from cassandra.cqlengine import connection
from cassandra.policies import DCAwareRoundRobinPolicy, TokenAwarePolicy
from cassandra.query import dict_factory
from loguru import logger

from src.cql_examples.runtime.config.config_data import CassandraConfig
from src.cql_examples.runtime.context import get_config

# Execution profile used for schema changes, which take longer than regular requests
SLOW_PROFILE = "slow"


class CqlSessionService:
    def __init__(self, config: CassandraConfig | None = None):
        """Capture the cluster settings; nothing is opened until ``session_scope``."""
        self._config = config or get_config().cassandra

    @property
    def connection_name(self) -> str:
        """Name under which the session is registered with cqlengine."""
        return self._config.connection_name

    def _execution_profiles(self) -> dict[object, ExecutionProfile]:
        cfg = self._config

        def load_balancing_policy():
            return TokenAwarePolicy(DCAwareRoundRobinPolicy(local_dc=cfg.local_datacenter))

        # cqlengine reads rows as dicts through the default profile
        return {
            EXEC_PROFILE_DEFAULT: ExecutionProfile(
                load_balancing_policy=load_balancing_policy(),
                request_timeout=cfg.request_timeout,
                row_factory=dict_factory,
            ),
            SLOW_PROFILE: ExecutionProfile(
                load_balancing_policy=load_balancing_policy(),
                request_timeout=cfg.slow_request_timeout,
                row_factory=dict_factory,
            ),
        }

    def build_cluster(self) -> Cluster:
        """Build a ``Cluster`` from the configuration without connecting it."""
        cfg = self._config
        cluster_kwargs = {
            "contact_points": cfg.contact_points,
            "port": cfg.port,
            "connect_timeout": cfg.connect_timeout,
            "execution_profiles": self._execution_profiles(),
        }
        if cfg.protocol_version is not None:
            cluster_kwargs["protocol_version"] = cfg.protocol_version
        if cfg.has_credentials:
            cluster_kwargs["auth_provider"] = PlainTextAuthProvider(
                username=cfg.username, password=cfg.password
            )

        logger.info(
            "Configuring cluster: contact_points={}, port={}, local_dc={}",
            cfg.contact_points,
            cfg.port,
            cfg.local_datacenter,
        )
        return Cluster(**cluster_kwargs)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Open a session and register it with cqlengine for the duration of the block.

        The cluster is shut down on every exit path, including errors.
        """
        cluster = self.build_cluster()
        try:
            session = cluster.connect()
            connection.register_connection(self.connection_name, session=session, default=True)
            logger.info("Connected to cluster {}", cluster.metadata.cluster_name)
            try:
                yield session
            finally:
                connection.unregister_connection(self.connection_name)
        finally:
            cluster.shutdown()
            logger.info("Cluster connection closed")
