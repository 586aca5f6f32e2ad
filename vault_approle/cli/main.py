"""
vault-approle CLI - Command-line interface for Vault AppRole roles.

Usage:
    vault-approle roles list      List role names
    vault-approle roles create    Create or update a role
"""

import typer

from .commands import roles

# Create the main Typer app
app = typer.Typer(
    name="vault-approle",
    help="Manage Vault AppRole roles",
    add_completion=False,
)

# Create roles subcommand group
roles_app = typer.Typer(help="Manage AppRole roles")
roles_app.command(name="list")(roles.roles_list_command)
roles_app.command(name="create")(roles.roles_create_command)
app.add_typer(roles_app, name="roles")


@app.callback()
def callback() -> None:
    """
    vault-approle - AppRole role management for Vault.

    Connection settings come from VAULT_ADDR, VAULT_TOKEN and friends.
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
