"""Command-line interface for ghuser."""

import sys
from typing import Optional

import click
import typer
from rich.console import Console

from ghuser.config import LookupConfig
from ghuser.core.lookup import UserLookup

MISSING_USER_MESSAGE = "É necessário informar um usuário com -u ou --user"

err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def resolve_user(flag_value: str | None, config: LookupConfig) -> str:
    """
    Resolve the identifier: --user flag, then GHUSER_USER, then empty.

    Args:
        flag_value: Value given on the command line, if any
        config: LookupConfig carrying the environment fallback

    Returns:
        The identifier, stripped; empty when none was supplied
    """
    for candidate in (flag_value, config.user):
        if candidate and candidate.strip():
            return candidate.strip()
    return ""


def build_app(lookup: UserLookup | None = None) -> typer.Typer:
    """
    Build the ghuser command.

    Args:
        lookup: UserLookup to dispatch to, built from the environment if None
    """
    app = typer.Typer(
        name="ghuser",
        help="Uma aplicação CLI para buscar usuários no GitHub",
        add_completion=False,
    )

    @app.command()
    def show(
        user: Optional[str] = typer.Option(
            None, "--user", "-u", help="Usuário do GitHub"
        ),
    ):
        """Uma aplicação CLI para buscar usuários no GitHub."""
        config = LookupConfig()

        identifier = resolve_user(user, config)
        if not identifier:
            err_console.print(MISSING_USER_MESSAGE, markup=False)
            raise typer.Exit(1)

        (lookup or UserLookup(config)).get_user(identifier)

    return app


def run(args: list[str] | None = None, lookup: UserLookup | None = None) -> int:
    """
    Run the CLI and return the process exit code.

    Args:
        args: Command-line arguments, without the program name
        lookup: Optional UserLookup override

    Returns:
        0 on success, 1 on a missing user or an argument error
    """
    command = typer.main.get_command(build_app(lookup))
    try:
        rv = command.main(args=args, prog_name="ghuser", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.exceptions.Abort:
        err_console.print("Aborted!", markup=False)
        return 1
    return rv if isinstance(rv, int) else 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
