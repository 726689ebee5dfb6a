"""Tests for the demo entry point."""

from unittest.mock import Mock

from engine_client import ClientError, EngineService, HttpWalletBackend
from engine_client import demo
from engine_client.demo import main


class TestDemo:
    """Test suite for demo main()."""

    def test_creates_then_lists(self, capsys):
        """Test that a wallet is created and then all wallets are listed."""
        service = Mock(spec=EngineService)
        service.create_wallet.return_value = {"result": {"walletAddress": "0xabc"}}
        service.get_all_wallets.return_value = {"result": [{"address": "0xabc"}]}

        assert main("alice", service=service) == 0

        service.create_wallet.assert_called_once_with("alice")
        out = capsys.readouterr().out
        assert "Wallet created:" in out
        assert "0xabc" in out
        assert "All wallets:" in out

    def test_continues_after_failure(self, capsys):
        """Test that a failed step is reported and the next step still runs."""
        service = Mock(spec=EngineService)
        service.create_wallet.side_effect = ClientError(400, "label taken")
        service.get_all_wallets.return_value = {"result": []}

        assert main(service=service) == 0

        service.create_wallet.assert_called_once_with("USER_ID")
        captured = capsys.readouterr()
        assert "Failed to create wallet: 400 label taken" in captured.err
        assert "All wallets:" in captured.out

    def test_closes_service_it_builds(self, monkeypatch, capsys):
        """Test that a service built from the environment is closed afterwards."""
        backend = Mock(spec=HttpWalletBackend)
        backend.create_wallet.return_value = {"result": {}}
        backend.get_all_wallets.return_value = {"result": []}
        monkeypatch.setattr(demo, "create_engine_service", lambda: EngineService(backend))

        assert main() == 0

        backend.close.assert_called_once_with()
        assert "All wallets:" in capsys.readouterr().out

    def test_invalid_configuration_halts(self, monkeypatch, capsys):
        """Test that invalid settings stop the demo with exit code 1."""
        monkeypatch.delenv("ENGINE_URL", raising=False)
        monkeypatch.delenv("ENGINE_TOKEN", raising=False)
        monkeypatch.chdir("/")

        assert main() == 1
        assert "Invalid environment variables" in capsys.readouterr().err
