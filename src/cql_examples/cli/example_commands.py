"""Commands running the example applications."""

from collections.abc import Callable
from enum import StrEnum
from types import ModuleType

import typer
from loguru import logger

from src.cql_examples.apps import killrvideo, lombok, record
from src.cql_examples.core.services.database.cql_session import CqlSessionService
from src.cql_examples.runtime.logging import configure_logging


class Example(StrEnum):
    lombok = "lombok"
    record = "record"
    killrvideo = "killrvideo"


EXAMPLES: dict[Example, ModuleType] = {
    Example.lombok: lombok,
    Example.record: record,
    Example.killrvideo: killrvideo,
}

LogLevelOption = typer.Option(
    None,
    "--log-level",
    case_sensitive=False,
    help="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to config.yaml.",
)


def _run_or_exit(action: Callable[[], None], description: str) -> None:
    try:
        action()
    except Exception as e:
        logger.opt(exception=e).error("{} failed: {}", description, e)
        raise typer.Exit(code=1) from e


def run_lombok(log_level: str | None = LogLevelOption) -> None:
    """Save and read back a product through mutable and immutable pydantic entities."""
    _run_or_exit(lambda: lombok.main(log_level), "lombok example")


def run_record(log_level: str | None = LogLevelOption) -> None:
    """Save and read back a product through a frozen dataclass entity."""
    _run_or_exit(lambda: record.main(log_level), "record example")


def run_killrvideo(log_level: str | None = LogLevelOption) -> None:
    """Create users and videos across the denormalized KillrVideo tables."""
    _run_or_exit(lambda: killrvideo.main(log_level), "killrvideo example")


def create_schema(
    example: Example = typer.Argument(..., help="Example whose keyspace and tables to create"),
    log_level: str | None = LogLevelOption,
) -> None:
    """Create the keyspace and tables of an example without running it."""
    module = EXAMPLES[example]

    def action() -> None:
        configure_logging(log_level)
        service = CqlSessionService()
        with service.session_scope() as session:
            module.maybe_create_schema(session)
        typer.echo(f"Schema of keyspace {module.KEYSPACE} is ready")

    _run_or_exit(action, f"{example} schema creation")
