"""Pytest fixtures and configuration."""

import os
import sys

import pytest
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables
load_dotenv()


@pytest.fixture(scope="session")
def settings():
    """Get application settings."""
    from netatmo_weather.config.settings import get_settings

    return get_settings()


@pytest.fixture
def measure_payload():
    """getmeasure response with two blocks of evenly spaced rows."""
    return {
        "body": [
            {
                "beg_time": 1000,
                "step_time": 60,
                "value": [
                    [21.5, None, 55, 1013.0, None, None, None, None, None],
                    [0.0, 400, 0, 1012.5, 30, None, None, None, None],
                ],
            },
            {
                "beg_time": 2000,
                "step_time": 300,
                "value": [
                    [19.8, 612, 61, 1010.2, 42, 12, 270, 25, 265],
                ],
            },
        ],
        "status": "ok",
        "time_exec": 0.034,
        "time_server": 1700000000,
    }


@pytest.fixture
def stations_payload():
    """Trimmed getstationsdata response with one station and one outdoor module."""
    return {
        "body": {
            "devices": [
                {
                    "_id": "70:ee:50:00:00:01",
                    "cipher_id": "enc:16:abc",
                    "date_setup": 1500000000,
                    "last_setup": 1500000000,
                    "type": "NAMain",
                    "last_status_store": 1700000000,
                    "module_name": "Indoor",
                    "firmware": 178,
                    "last_upgrade": 1600000000,
                    "wifi_status": 56,
                    "reachable": True,
                    "co2_calibrating": False,
                    "station_name": "Home",
                    "data_type": ["Temperature", "CO2", "Humidity", "Noise", "Pressure"],
                    "place": {
                        "altitude": 40,
                        "city": "千代田区",
                        "country": "JP",
                        "timezone": "Asia/Tokyo",
                        "location": [139.752778, 35.6825],
                    },
                    "dashboard_data": {
                        "time_utc": 1700000000,
                        "Temperature": 22.1,
                        "CO2": 512,
                        "Humidity": 45,
                        "Noise": 38,
                        "Pressure": 1014.2,
                        "AbsolutePressure": 1009.4,
                        "min_temp": 20.3,
                        "max_temp": 23.0,
                        "date_min_temp": 1699970000,
                        "date_max_temp": 1699990000,
                        "temp_trend": "stable",
                        "pressure_trend": "up",
                    },
                    "modules": [
                        {
                            "_id": "02:00:00:00:00:01",
                            "type": "NAModule1",
                            "module_name": "Outdoor",
                            "data_type": ["Temperature", "Humidity"],
                            "last_setup": 1500000100,
                            "reachable": True,
                            "firmware": 50,
                            "last_message": 1700000000,
                            "last_seen": 1699999990,
                            "rf_status": 60,
                            "battery_vp": 5200,
                            "battery_percent": 72,
                            "dashboard_data": {
                                "time_utc": 1699999990,
                                "Temperature": 8.4,
                                "Humidity": 80,
                                "temp_trend": "down",
                            },
                        }
                    ],
                }
            ],
            "user": {
                "mail": "someone@example.com",
                "administrative": {
                    "lang": "ja-JP",
                    "reg_locale": "ja-JP",
                    "country": "JP",
                    "unit": 0,
                    "windunit": 0,
                    "pressureunit": 0,
                    "feel_like_algo": 0,
                },
            },
        },
        "status": "ok",
        "time_exec": 0.05,
        "time_server": 1700000000,
    }
