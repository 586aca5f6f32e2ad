"""
Basic vault-approle usage example.

This example demonstrates the core features:
- Creating and updating AppRole roles
- Listing roles
- Handling failures

Run with (against a dev server, e.g. `vault server -dev` with approle enabled):
    VAULT_ADDR=http://127.0.0.1:8200 VAULT_TOKEN=root python examples/basic_usage.py
"""

import asyncio
from datetime import timedelta

from vault_approle import AppRoleClient, AppRoleError, RoleOptions, TokenType


async def main():
    # Create client (loads config from VAULT_* env vars or .env)
    client = await AppRoleClient.create()

    try:
        # =================================================================
        # 1. Create a role from RoleOptions
        # =================================================================
        print("Creating ci-runner role...")

        await client.roles.create_or_update(
            RoleOptions(
                name="ci-runner",
                secret_id_ttl=timedelta(minutes=10),
                secret_id_max_uses=1,
                token_ttl=timedelta(hours=1),
                token_max_ttl=timedelta(hours=4),
                token_policies=["ci-read"],
                secret_id_bound_cidrs=["10.0.0.0/16"],
            )
        )
        print("  Written: ci-runner")

        # =================================================================
        # 2. Create a role from keyword fields
        # =================================================================
        print("\nCreating batch-jobs role...")

        await client.roles.create_or_update(
            name="batch-jobs",
            token_type=TokenType.BATCH,
            token_ttl="30m",
            token_policies=["jobs"],
        )
        print("  Written: batch-jobs")

        # =================================================================
        # 3. Update an existing role (upsert replaces it)
        # =================================================================
        print("\nUpdating ci-runner role...")

        await client.roles.create_or_update(
            name="ci-runner",
            token_ttl=7200,
            token_policies=["ci-read", "ci-write"],
        )
        print("  Updated: ci-runner")

        # =================================================================
        # 4. List roles
        # =================================================================
        print("\nListing roles...")

        for name in await client.roles.list():
            print(f"  - {name}")

        # =================================================================
        # 5. Invalid input never reaches the server
        # =================================================================
        print("\nTrying an invalid role name...")

        try:
            await client.roles.create_or_update(name="bad/name")
        except AppRoleError as e:
            print(f"  Rejected: {e}")

    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
