"""
Tests for vault_approle.cli module.
"""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from vault_approle.cli.main import app
from vault_approle.client import AppRoleClient

runner = CliRunner()


def patch_client(client):
    """Make AppRoleClient.create() return the given client."""
    return patch(
        "vault_approle.cli.commands.roles.AppRoleClient.create",
        AsyncMock(return_value=client),
    )


class TestRolesCLI:
    """Tests for the roles command group."""

    def test_list(self, app_config, mock_transport):
        mock_transport.issue_list = AsyncMock(return_value={"data": {"keys": ["web", "ci"]}})
        client = AppRoleClient(config=app_config, transport=mock_transport)

        with patch_client(client):
            result = runner.invoke(app, ["roles", "list"])

        assert result.exit_code == 0
        assert "ci" in result.output
        assert "web" in result.output
        mock_transport.close.assert_awaited_once()

    def test_list_empty(self, app_config, mock_transport):
        client = AppRoleClient(config=app_config, transport=mock_transport)

        with patch_client(client):
            result = runner.invoke(app, ["roles", "list"])

        assert result.exit_code == 0
        assert "No roles found" in result.output

    def test_list_error(self, app_config, mock_transport):
        mock_transport.issue_list = AsyncMock(side_effect=RuntimeError("boom"))
        client = AppRoleClient(config=app_config, transport=mock_transport)

        with patch_client(client):
            result = runner.invoke(app, ["roles", "list"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_create(self, app_config, mock_transport):
        client = AppRoleClient(config=app_config, transport=mock_transport)

        with patch_client(client):
            result = runner.invoke(
                app,
                [
                    "roles",
                    "create",
                    "ci-runner",
                    "--token-ttl",
                    "1h",
                    "-p",
                    "ci-read",
                    "-p",
                    "ci-write",
                    "--no-bind-secret-id",
                    "--token-type",
                    "batch",
                ],
            )

        assert result.exit_code == 0, result.output
        method, path, body = mock_transport.issue.await_args.args
        assert method == "POST"
        assert path == "/v1/auth/approle/role/ci-runner"
        assert '"token_ttl": 3600' in body
        assert '"bind_secret_id": false' in body
        assert '"token_policies": ["ci-read", "ci-write"]' in body
        assert '"token_type": "batch"' in body

    def test_create_invalid_duration(self, app_config, mock_transport):
        client = AppRoleClient(config=app_config, transport=mock_transport)

        with patch_client(client):
            result = runner.invoke(app, ["roles", "create", "ci-runner", "--token-ttl", "soon"])

        assert result.exit_code == 1
        mock_transport.issue.assert_not_awaited()

    def test_list_failure_message(self, app_config, mock_transport):
        mock_transport.issue_list = AsyncMock(return_value={"data": None})
        client = AppRoleClient(config=app_config, transport=mock_transport)

        with patch_client(client):
            result = runner.invoke(app, ["roles", "list"])

        assert result.exit_code == 1
        assert "malformed" in result.output
