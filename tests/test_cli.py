"""Tests for the example command line program."""

import io
from unittest.mock import patch

import pytest

from netatmo_weather import cli
from netatmo_weather.config.settings import Settings
from netatmo_weather.netatmo.measures import Measure, MeasureSet
from netatmo_weather.netatmo.schemas import GetStationsDataResponse

CREDENTIALS = ["-c", "id", "-s", "secret", "-u", "user@example.com", "-p", "pw"]


@pytest.fixture(autouse=True)
def empty_settings():
    """Run the CLI without picking up real credentials from the environment."""
    settings = Settings(
        _env_file=None,
        netatmo_client_id="",
        netatmo_client_secret="",
        netatmo_username="",
        netatmo_password="",
        netatmo_access_token=None,
    )
    with patch.object(cli, "get_settings", return_value=settings):
        yield


@pytest.fixture
def mock_client():
    with patch.object(cli, "NetatmoClient") as client_cls:
        yield client_cls.return_value


class TestMain:
    """Test CLI dispatch."""

    def test_missing_credentials(self, mock_client):
        assert cli.main([]) == 2
        mock_client.get_stations_data.assert_not_called()

    def test_stations_listing(self, mock_client, stations_payload):
        body = GetStationsDataResponse.model_validate(stations_payload).body
        mock_client.get_stations_data.return_value = (body.devices, body.user)
        out = io.StringIO()

        assert cli.main(CREDENTIALS, out=out) == 0

        text = out.getvalue()
        assert "Mail: someone@example.com" in text
        assert "Device 1 of 1:" in text
        assert "Module ID: 02:00:00:00:00:01" in text
        assert "Temperature: 8.4 °C" in text

    def test_newest_defaults_module_to_device(self, mock_client):
        mock_client.get_measure_by_newest.return_value = Measure(
            "dev", "dev", 1000, {"Temperature": 21.5, "CO2": None}
        )
        out = io.StringIO()

        assert cli.main(CREDENTIALS + ["-d", "dev"], out=out) == 0

        mock_client.get_measure_by_newest.assert_called_once_with("dev", "dev")
        assert "21.5" in out.getvalue()

    def test_newest_no_data(self, mock_client):
        mock_client.get_measure_by_newest.return_value = None
        out = io.StringIO()

        assert cli.main(CREDENTIALS + ["-d", "dev", "-m", "mod"], out=out) == 0

        assert out.getvalue().strip() == "No Data"

    def test_range(self, mock_client):
        mock_client.get_measure_by_time_range.return_value = MeasureSet(
            [Measure("dev", "mod", 1000, {"Temperature": 20.0}), Measure("dev", "mod", 1300, {"Temperature": 20.5})]
        )
        out = io.StringIO()

        with patch.object(cli.time, "time", return_value=10_000.0):
            assert cli.main(CREDENTIALS + ["-d", "dev", "-m", "mod", "-a", "30"], out=out) == 0

        mock_client.get_measure_by_time_range.assert_called_once_with("dev", "mod", 8200, 10_000)
        lines = out.getvalue().strip().splitlines()
        assert lines[0].split()[:2] == ["ts_utc", "Temperature"]
        assert len(lines) == 3


class TestFormatting:
    """Test output helpers."""

    def test_format_timestamp(self):
        assert cli.format_timestamp(0) == "1970-01-01 00:00:00"
        assert cli.format_timestamp(None) == "-"

    def test_print_measures_marks_missing(self):
        out = io.StringIO()
        cli.print_measures(MeasureSet([Measure("dev", "mod", 1000, {"Temperature": 20.0})]), out)

        assert "null" in out.getvalue()
