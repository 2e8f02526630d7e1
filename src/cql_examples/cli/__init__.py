"""Main CLI application module."""

import typer

from .example_commands import create_schema, run_killrvideo, run_lombok, run_record

app = typer.Typer(
    help="Cassandra object-mapper examples",
    no_args_is_help=True,
)

app.command("lombok")(run_lombok)
app.command("record")(run_record)
app.command("killrvideo")(run_killrvideo)
app.command("schema")(create_schema)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
