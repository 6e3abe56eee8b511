"""Tests for the catalog command line."""

from unittest.mock import patch

from typer.testing import CliRunner

from src.catalog.cli import app
from src.catalog.core.services import TokenVerifier
from src.catalog.runtime.context import get_config

runner = CliRunner()


class TestIssueToken:
    def test_token_verifies_with_configured_secret(self):
        result = runner.invoke(app, ["issue-token", "--subject", "ops", "--role", "ADMIN", "--role", "USER"])

        assert result.exit_code == 0
        token = result.stdout.strip().splitlines()[-1]
        principal = TokenVerifier.from_config(get_config()).verify(token)
        assert principal.subject == "ops"
        assert principal.authorities == frozenset({"ROLE_ADMIN", "ROLE_USER"})

    def test_unknown_algorithm_fails(self):
        result = runner.invoke(app, ["issue-token", "-s", "ops", "--algorithm", "none"])

        assert result.exit_code == 1


class TestInitDb:
    def test_creates_tables(self):
        with patch("src.catalog.runtime.init_db.init_db") as init_db:
            result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        init_db.assert_called_once_with()
