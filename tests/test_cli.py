"""Tests for the warp-deploy command line entry point."""

import asyncio
import json
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from conftest import TEST_ADDRESS, TEST_PRIVATE_KEY
from warp_route_deploy import DeployedRouter, TokenType, WarpRouteDeployer, WarpRouteMultiCollateralDeployer
from warp_route_deploy.artifacts import read_json
from warp_route_deploy.cli import create_deployer, deploy_warp_route, get_args, main, run
from warp_route_deploy.log import NOISY_LOGGERS, setup_console_logging
from warp_route_deploy.warp_tokens import WARP_ROUTE_CONFIG, WARP_ROUTE_MULTI_COLLATERAL_CONFIG

FUJI_ROUTER = "0x" + "c3" * 20
GOERLI_ROUTER = "0x" + "a1" * 20

NATIVE_ROUTE = {
    "base": {"chainName": "fuji", "type": "native"},
    "synthetics": [{"chainName": "goerli"}],
}


@pytest.fixture
def route_file(tmp_path):
    path = tmp_path / "route.json"
    path.write_text(json.dumps(NATIVE_ROUTE))
    return path


class TestGetArgs:
    """Tests for argument parsing."""

    def test_key_flag(self, monkeypatch) -> None:
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)

        args = get_args(["--key", TEST_PRIVATE_KEY])

        assert args.key == TEST_PRIVATE_KEY
        assert args.multi_collateral is False
        assert args.dry_run is False
        assert args.artifacts_dir == "./artifacts/"

    def test_key_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("WARP_PRIVATE_KEY", TEST_PRIVATE_KEY)

        assert get_args([]).key == TEST_PRIVATE_KEY

    def test_missing_key(self, monkeypatch) -> None:
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            get_args([])

        assert exc_info.value.code == 2

    def test_malformed_key(self, monkeypatch) -> None:
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)

        with pytest.raises(SystemExit):
            get_args(["--key", "0x1234"])

    def test_options(self, monkeypatch) -> None:
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)

        args = get_args(
            [
                "--key",
                TEST_PRIVATE_KEY,
                "--multi-collateral",
                "--dry-run",
                "--estimate-gas",
                "--min-balance",
                "1000",
            ]
        )

        assert args.multi_collateral is True
        assert args.dry_run is True
        assert args.estimate_gas is True
        assert args.min_balance == 1000


class TestRun:
    """Tests for the top level runner."""

    def test_returns_result(self) -> None:
        async def _ok():
            return 42

        assert run("test", _ok()) == 42

    def test_error_exits_with_status_1(self, caplog) -> None:
        async def _fail():
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            run("test", _fail())

        assert exc_info.value.code == 1
        assert "test failed" in caplog.text


class TestCreateDeployer:
    """Tests for picking the config and deployer class."""

    def _args(self, monkeypatch, *extra: str):
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)
        return get_args(["--key", TEST_PRIVATE_KEY, "--dry-run", *extra])

    def test_static_single_collateral(self, monkeypatch) -> None:
        deployer = create_deployer(self._args(monkeypatch), MagicMock())

        assert type(deployer) is WarpRouteDeployer
        assert deployer.raw_config == WARP_ROUTE_CONFIG
        assert deployer.router_deployer is None

    def test_static_multi_collateral(self, monkeypatch) -> None:
        deployer = create_deployer(self._args(monkeypatch, "--multi-collateral"), MagicMock())

        assert type(deployer) is WarpRouteMultiCollateralDeployer
        assert deployer.raw_config == WARP_ROUTE_MULTI_COLLATERAL_CONFIG

    def test_config_file(self, monkeypatch, route_file) -> None:
        deployer = create_deployer(self._args(monkeypatch, "--config", str(route_file)), MagicMock())

        assert deployer.raw_config == NATIVE_ROUTE

    def test_router_deployer_built(self, monkeypatch) -> None:
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)
        args = get_args(["--key", TEST_PRIVATE_KEY, "--estimate-gas"])
        multi_provider = MagicMock()

        with (
            patch("warp_route_deploy.cli.RouterArtifacts.from_directory") as mock_load,
            patch("warp_route_deploy.cli.HypERC20Deployer") as mock_deployer_class,
        ):
            deployer = create_deployer(args, multi_provider)

        mock_load.assert_called_once_with("./contracts/out")
        assert deployer.router_deployer is mock_deployer_class.return_value
        assert mock_deployer_class.call_args.kwargs["gas"].estimate_gas is True


class TestDeployWarpRoute:
    """Tests for the end to end command."""

    def _args(self, monkeypatch, *extra: str):
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)
        return get_args(["--key", TEST_PRIVATE_KEY, *extra])

    def test_dry_run_logs_router_configs(self, monkeypatch, route_file, tmp_path, caplog) -> None:
        """A dry run needs no RPC for a native route and writes nothing."""
        args = self._args(monkeypatch, "--dry-run", "--config", str(route_file), "--artifacts-dir", str(tmp_path))

        with caplog.at_level(logging.INFO, logger="warp_route_deploy"):
            asyncio.run(deploy_warp_route(args))

        assert "fuji:" in caplog.text
        assert "goerli:" in caplog.text
        assert TEST_ADDRESS in caplog.text
        assert not (tmp_path / "warp-token-addresses.json").exists()

    def test_deploy(self, monkeypatch, route_file, tmp_path) -> None:
        contracts = {
            "fuji": DeployedRouter(chain_name="fuji", router=FUJI_ROUTER, token_type=TokenType.native),
            "goerli": DeployedRouter(chain_name="goerli", router=GOERLI_ROUTER, token_type=TokenType.synthetic),
        }
        args = self._args(monkeypatch, "--config", str(route_file), "--artifacts-dir", str(tmp_path))

        with (
            patch("warp_route_deploy.cli.RouterArtifacts.from_directory"),
            patch("warp_route_deploy.cli.HypERC20Deployer") as mock_deployer_class,
            patch("warp_route_deploy.cli.assert_balances", new_callable=AsyncMock) as mock_balances,
        ):
            mock_deployer_class.return_value.deploy = AsyncMock(return_value=contracts)
            asyncio.run(deploy_warp_route(args))

        assert mock_balances.await_args.args[1] == ["fuji", "goerli"]
        assert mock_balances.await_args.args[2] == 1
        assert read_json(tmp_path, "warp-token-addresses.json") == {
            "fuji": {"router": FUJI_ROUTER, "tokenType": "native"},
            "goerli": {"router": GOERLI_ROUTER, "tokenType": "synthetic"},
        }

    def test_unfunded_signer_deploys_nothing(self, monkeypatch, route_file, tmp_path) -> None:
        args = self._args(monkeypatch, "--config", str(route_file), "--artifacts-dir", str(tmp_path))

        with (
            patch("warp_route_deploy.cli.RouterArtifacts.from_directory"),
            patch("warp_route_deploy.cli.HypERC20Deployer") as mock_deployer_class,
            patch(
                "warp_route_deploy.cli.assert_balances",
                new_callable=AsyncMock,
                side_effect=RuntimeError("unfunded"),
            ),
        ):
            mock_deployer_class.return_value.deploy = AsyncMock()
            with pytest.raises(RuntimeError, match="unfunded"):
                asyncio.run(deploy_warp_route(args))

        mock_deployer_class.return_value.deploy.assert_not_called()


class TestMain:
    """Tests for main()."""

    def test_main_sets_up_logging_and_runs(self, monkeypatch) -> None:
        monkeypatch.delenv("WARP_PRIVATE_KEY", raising=False)

        with (
            patch("warp_route_deploy.cli.setup_console_logging") as mock_logging,
            patch("warp_route_deploy.cli.run") as mock_run,
            patch("warp_route_deploy.cli.deploy_warp_route", new=MagicMock()) as mock_deploy,
        ):
            main(["--key", TEST_PRIVATE_KEY, "--log-level", "debug"])

        mock_logging.assert_called_once_with("debug")
        mock_run.assert_called_once_with("Warp route deployment", mock_deploy.return_value)


class TestConsoleLogging:
    """Tests for console logging set-up."""

    def test_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warning")

        with patch("warp_route_deploy.log.coloredlogs.install") as mock_install:
            setup_console_logging("info")

        assert mock_install.call_args.kwargs["level"] == logging.WARNING

    def test_noisy_loggers_quieted(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        with patch("warp_route_deploy.log.coloredlogs.install"):
            setup_console_logging("debug")

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_unknown_level(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        with pytest.raises(ValueError, match="Unknown log level"):
            setup_console_logging("chatty")
