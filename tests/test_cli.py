"""Tests for the command-line entry point and session log."""

import json
from unittest.mock import patch

import pytest

from netview.cli import main, run
from netview.core.errors import InterfaceError, LocalIPError
from netview.core.session_log import SessionLogger
from netview.core.utils import SectionResult, Status


@pytest.fixture(autouse=True)
def fresh_logger():
    SessionLogger.reset()
    yield
    SessionLogger.reset()


def ok_routes(protocol):
    return SectionResult(title="Routing Table", status=Status.SUCCESS, summary=f"routes {protocol}")


class TestOnlyIP:

    @patch("netview.core.net_info.get_local_ip", return_value="10.1.2.3")
    def test_prints_ip(self, _, capsys):
        assert run("ipv4", only_ip=True) == 0
        assert capsys.readouterr().out.strip() == "10.1.2.3"

    @patch("netview.core.net_info.get_local_ip", side_effect=LocalIPError("Error getting IP address: boom"))
    def test_error_exits_nonzero(self, _, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--ip"])
        assert excinfo.value.code == 1
        assert "boom" in capsys.readouterr().err


class TestFullRun:

    @patch("netview.core.routing.routing_table", side_effect=ok_routes)
    @patch("netview.core.net_info.display_ip_interfaces", return_value=3)
    @patch("netview.core.net_info.get_local_ip", return_value="10.1.2.3")
    def test_sections_run_in_order(self, _ip, mock_ifaces, mock_routes, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["-p", "all"])
        assert excinfo.value.code == 0
        mock_ifaces.assert_called_once_with("all")
        mock_routes.assert_called_once_with("all")
        out = capsys.readouterr().out
        assert "Local Network Interfaces and IP Addresses" in out
        assert "Main IP address: 10.1.2.3" in out

    @patch("netview.core.routing.routing_table", side_effect=ok_routes)
    @patch("netview.core.net_info.display_ip_interfaces", side_effect=InterfaceError("No network interfaces found."))
    @patch("netview.core.net_info.get_local_ip", side_effect=LocalIPError("Error getting IP address: down"))
    def test_failures_do_not_stop_routes(self, _ip, _ifaces, mock_routes, capsys):
        assert run("ipv4") == 0
        mock_routes.assert_called_once_with("ipv4")
        err = capsys.readouterr().err
        assert "Failed to get network interfaces: No network interfaces found." in err
        assert "down" in err

    def test_invalid_protocol_is_rejected(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["-p", "ipx"])
        assert excinfo.value.code == 2

    @patch("netview.core.routing.routing_table", side_effect=ok_routes)
    @patch("netview.core.net_info.display_ip_interfaces", return_value=1)
    @patch("netview.core.net_info.get_local_ip", return_value="10.1.2.3")
    def test_session_log_written(self, _ip, _ifaces, _routes, tmp_path, capsys):
        assert run("ipv4", log_dir=str(tmp_path)) == 0
        logs = list(tmp_path.glob("session_*.jsonl"))
        assert len(logs) == 1
        entries = [json.loads(line) for line in logs[0].read_text(encoding="utf-8").splitlines()]
        assert [e["title"] for e in entries] == ["Main IP Address", "Network Interfaces", "Routing Table"]
        assert all(e["status"] == "success" for e in entries)
        assert "3 section(s)" in capsys.readouterr().out


class TestSessionLogger:

    def test_disabled_without_directory(self, tmp_path):
        logger = SessionLogger()
        logger.log(SectionResult(title="Routing Table", status=Status.ERROR))
        assert not logger.enabled
        assert logger.log_path == ""
        assert len(logger.results) == 1
        assert "1 failed" in logger.summary()

    def test_singleton(self, tmp_path):
        assert SessionLogger.get(str(tmp_path)) is SessionLogger.get()

    def test_empty_summary(self):
        assert SessionLogger().summary() == "No sections run."
