"""
vault-approle roles command - Role management CLI.

Create, update and list AppRole roles via command line.
"""

import asyncio
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ...client import AppRoleClient
from ...roles.models import TokenType

console = Console()


def roles_list_command() -> None:
    """
    List AppRole roles.

    Example:
        $ vault-approle roles list
    """
    console.print("\n[bold cyan]AppRole Roles[/bold cyan]\n")

    asyncio.run(_list_roles())


async def _list_roles() -> None:
    """Internal async function to list roles."""
    try:
        async with await AppRoleClient.create() as client:
            names = await client.roles.list()

        if not names:
            console.print("[yellow]No roles found[/yellow]\n")
            return

        table = Table(title=f"Roles (showing {len(names)})")
        table.add_column("Name", style="cyan")
        for name in names:
            table.add_row(name)

        console.print(table)
        console.print()

    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def roles_create_command(
    name: str = typer.Argument(..., help="Role name"),
    bind_secret_id: Optional[bool] = typer.Option(
        None,
        "--bind-secret-id/--no-bind-secret-id",
        help="Require a secret ID at login (Vault default: required)",
    ),
    secret_id_cidrs: Optional[List[str]] = typer.Option(
        None,
        "--secret-id-cidr",
        help="CIDR block allowed to log in with a secret ID (repeatable)",
    ),
    secret_id_num_uses: int = typer.Option(0, "--secret-id-num-uses", min=0, help="Uses per secret ID, 0 = unlimited"),
    secret_id_ttl: Optional[str] = typer.Option(None, "--secret-id-ttl", help="Secret ID lifetime, e.g. 600 or 10m"),
    local_secret_ids: bool = typer.Option(
        False,
        "--local-secret-ids",
        help="Make secret IDs cluster-local (only at creation)",
    ),
    token_ttl: Optional[str] = typer.Option(None, "--token-ttl", help="Token TTL, e.g. 3600 or 1h"),
    token_max_ttl: Optional[str] = typer.Option(None, "--token-max-ttl", help="Token max TTL"),
    token_explicit_max_ttl: Optional[str] = typer.Option(None, "--token-explicit-max-ttl", help="Hard token TTL cap"),
    token_period: Optional[str] = typer.Option(None, "--token-period", help="Period for periodic tokens"),
    token_policies: Optional[List[str]] = typer.Option(
        None,
        "--policy",
        "-p",
        help="Policy to attach to issued tokens (repeatable)",
    ),
    token_cidrs: Optional[List[str]] = typer.Option(
        None,
        "--token-cidr",
        help="CIDR block the issued token is bound to (repeatable)",
    ),
    no_default_policy: bool = typer.Option(False, "--no-default-policy", help="Do not attach the default policy"),
    token_num_uses: int = typer.Option(0, "--token-num-uses", min=0, help="Uses per token, 0 = unlimited"),
    token_type: Optional[TokenType] = typer.Option(None, "--token-type", help="Type of token to issue"),
) -> None:
    """
    Create or update a role.

    Example:
        $ vault-approle roles create ci-runner --token-ttl 1h -p ci-read
        $ vault-approle roles create batch-jobs --token-type batch --secret-id-ttl 10m
    """
    console.print("\n[bold cyan]Writing Role[/bold cyan]\n")

    fields: Dict[str, Any] = {
        "name": name,
        "require_secret_id": bind_secret_id,
        "secret_id_bound_cidrs": secret_id_cidrs or [],
        "secret_id_max_uses": secret_id_num_uses,
        "local_secret_ids": local_secret_ids,
        "token_policies": token_policies or [],
        "token_bound_cidrs": token_cidrs or [],
        "token_no_default_policy": no_default_policy,
        "token_num_uses": token_num_uses,
        "token_type": token_type,
    }
    durations = {
        "secret_id_ttl": secret_id_ttl,
        "token_ttl": token_ttl,
        "token_max_ttl": token_max_ttl,
        "token_explicit_max_ttl": token_explicit_max_ttl,
        "token_period": token_period,
    }
    fields.update({key: value for key, value in durations.items() if value is not None})

    asyncio.run(_create_role(fields))


async def _create_role(fields: Dict[str, Any]) -> None:
    """Internal async function to create or update a role."""
    try:
        async with await AppRoleClient.create() as client:
            await client.roles.create_or_update(**fields)
            path = client.roles.role_path(fields["name"])

        console.print("[green]✓[/green] Role written successfully!")
        console.print(f"\nName: [cyan]{fields['name']}[/cyan]")
        console.print(f"Path: [cyan]{path}[/cyan]\n")

    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
