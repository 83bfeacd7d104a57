"""HintDB CLI - Main entry point."""

from enum import StrEnum
from typing import Annotated

import typer

import hintdb
from hintdb.cli.context import CLIContext, get_database_url
from hintdb.cli.output import OutputFormatter
from hintdb.cli.parsing import parse_arguments
from hintdb.core.types import PlaceholderKind

app = typer.Typer(
    name="hintdb",
    help="HintDB CLI - SQL queries with type-hinted placeholders",
    no_args_is_help=True,
)

PLACEHOLDER_HELP = {
    PlaceholderKind.IDENTIFIER: ("name", "table or field name, backticks stripped"),
    PlaceholderKind.STRING: ("string", "quoted and escaped literal, '' and null become null"),
    PlaceholderKind.INTEGER: ("integer", "numeric value, fractions truncated"),
    PlaceholderKind.IN_LIST: ("array", "'a','b','c' for IN (...)"),
    PlaceholderKind.SET_LIST: ("update", "field1='value1',field2='value2'"),
    PlaceholderKind.INSERT_TUPLE: ("insert", "(field1,field2) VALUES ('value1','value2')"),
    PlaceholderKind.RAW: ("parsed", "already parsed fragment, inserted as is"),
}


class Fetch(StrEnum):
    """Result shape for the query command."""

    ALL = "all"
    ROW = "row"
    ONE = "one"
    COL = "col"


@app.callback()
def main_callback(
    ctx: typer.Context,
    database: Annotated[
        str | None,
        typer.Option(
            "--database",
            "-d",
            envvar="HINTDB_URL",
            help="Database URL (PostgreSQL or SQLite)",
        ),
    ] = None,
    echo: Annotated[
        bool,
        typer.Option(
            "--echo",
            "-e",
            help="Echo SQL statements to console",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON (machine-readable)",
        ),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    ctx.obj = CLIContext(
        database_url=get_database_url(database),
        echo=echo,
        json_output=json_output,
    )


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"HintDB v{hintdb.__version__}")


@app.command()
def placeholders(ctx: typer.Context) -> None:
    """List the supported placeholders."""
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)
    rows = [
        {"placeholder": kind.tag, "name": name, "substitutes": description}
        for kind, (name, description) in PLACEHOLDER_HELP.items()
    ]
    formatter.print_table("Placeholders", rows, ["placeholder", "name", "substitutes"])


@app.command()
def parse(
    ctx: typer.Context,
    template: Annotated[str, typer.Argument(help="SQL template with placeholders")],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Placeholder arguments (JSON, or plain strings)"),
    ] = None,
) -> None:
    """Substitute placeholders without touching a database.

    Strings are escaped with standard quote doubling.

    Examples:

        hintdb parse "SELECT * FROM ?n WHERE id IN (?a)" users "[1, 2]"
        hintdb parse "UPDATE ?n SET ?u" users '{"name": "Ann"}'
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        sql = hintdb.substitute(template, parse_arguments(args))
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)

    formatter.print_sql(sql)


@app.command()
def query(
    ctx: typer.Context,
    template: Annotated[str, typer.Argument(help="SQL template with placeholders")],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Placeholder arguments (JSON, or plain strings)"),
    ] = None,
    fetch: Annotated[
        Fetch,
        typer.Option("--fetch", "-f", help="Result shape: all rows, first row, one value, column"),
    ] = Fetch.ALL,
) -> None:
    """Run a query with placeholders against the database.

    Examples:

        hintdb query "SELECT * FROM ?n LIMIT ?i" users 10
        hintdb query "SELECT name FROM ?n WHERE id = ?i" users 1 --fetch one
        hintdb -d sqlite:///app.db query "INSERT INTO ?n ?v" users '{"name": "Ann"}'
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.json_output)

    try:
        db = cli_ctx.get_db()
        values = parse_arguments(args)

        if fetch is Fetch.ONE:
            formatter.print_data(db.get_one(template, *values))
        elif fetch is Fetch.COL:
            formatter.print_data(db.get_col(template, *values))
        elif fetch is Fetch.ROW:
            row = db.get_row(template, *values)
            rows = [row] if row else []
            formatter.print_table("Row", rows, list(row) if row else [])
        else:
            rows = db.get_all(template, *values)
            if rows or cli_ctx.json_output:
                formatter.print_table(f"{len(rows)} rows", rows, list(rows[0]) if rows else [])
            else:
                typer.echo("Query executed successfully (no results)")

    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
