#!/usr/bin/env python3
"""
Example command line program for the Netatmo client.

Usage:
    # List stations, modules and dashboard readings
    python -m netatmo_weather.cli

    # Newest measure of the main module
    python -m netatmo_weather.cli -d 70:ee:50:00:00:01

    # Last 60 minutes of an outdoor module
    python -m netatmo_weather.cli -d 70:ee:50:00:00:01 -m 02:00:00:00:00:01 -a 60

Credentials default to NETATMO_* environment variables (or .env).
"""

import argparse
import logging
import sys
import time
from datetime import datetime, timezone
from typing import List, Optional, TextIO

from netatmo_weather.config import MEASUREMENT_UNITS, get_settings
from netatmo_weather.netatmo import Device, Measure, MeasureSet, NetatmoClient, User
from netatmo_weather.netatmo.schemas import DashboardData

logger = logging.getLogger(__name__)


def format_timestamp(timestamp: Optional[int]) -> str:
    if timestamp is None:
        return "-"
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def print_dashboard(data: Optional[DashboardData], indent: str, out: TextIO) -> None:
    if data is None:
        print(f"{indent}Dashboard data: (no data)", file=out)
        return

    print(f"{indent}Dashboard data (UTC {format_timestamp(data.time_utc)}):", file=out)
    readings = [
        ("Temperature", data.temperature),
        ("CO2", data.co2),
        ("Humidity", data.humidity),
        ("Noise", data.noise),
        ("Pressure", data.pressure),
        ("Rain", data.rain),
        ("WindStrength", data.wind_strength),
        ("WindAngle", data.wind_angle),
        ("GustStrength", data.gust_strength),
        ("GustAngle", data.gust_angle),
    ]
    for name, value in readings:
        if value is not None:
            unit = MEASUREMENT_UNITS.get(name, "mm")
            print(f"{indent}  {name}: {value} {unit}", file=out)


def print_stations(devices: List[Device], user: User, out: TextIO = sys.stdout) -> None:
    admin = user.administrative
    print("User information:", file=out)
    print(f"  Mail: {user.mail}", file=out)
    print(f"  Language: {admin.lang}", file=out)
    print(f"  Country: {admin.country}", file=out)
    print(f"  Unit: {admin.describe_unit()}", file=out)
    print(f"  Wind unit: {admin.describe_wind_unit()}", file=out)
    print(f"  Pressure unit: {admin.describe_pressure_unit()}", file=out)
    print(f"  Feel like algorithm: {admin.describe_feel_like_algorithm()}", file=out)

    for i, device in enumerate(devices, start=1):
        print(f"\nDevice {i} of {len(devices)}:", file=out)
        print(f"  Device ID: {device.id}", file=out)
        print(f"  Station name: {device.station_name}", file=out)
        print(f"  Type: {device.type}", file=out)
        print(f"  Data types: {', '.join(device.data_type)}", file=out)
        print(f"  Reachable: {device.reachable}", file=out)
        print(
            f"  Location: {device.place.city}, {device.place.country} "
            f"({device.place.latitude:f}, {device.place.longitude:f})",
            file=out,
        )
        print_dashboard(device.dashboard_data, "  ", out)

        for j, module in enumerate(device.modules, start=1):
            print(f"\n  Module {j} of {len(device.modules)}:", file=out)
            print(f"    Module ID: {module.id}", file=out)
            print(f"    Module name: {module.module_name}", file=out)
            print(f"    Battery: {module.battery_percent} %", file=out)
            print(f"    Last seen: {format_timestamp(module.last_seen)}", file=out)
            print_dashboard(module.dashboard_data, "    ", out)


def print_measures(measures: MeasureSet, out: TextIO = sys.stdout) -> None:
    df = measures.to_dataframe().drop(columns=["device_id", "module_id", "timestamp"])
    print(df.to_string(index=False, na_rep="null"), file=out)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Netatmo weather station example")
    parser.add_argument("-c", dest="client_id", default=settings.netatmo_client_id, help="Netatmo client id")
    parser.add_argument("-s", dest="client_secret", default=settings.netatmo_client_secret, help="Netatmo client secret")
    parser.add_argument("-u", dest="username", default=settings.netatmo_username, help="Netatmo user name")
    parser.add_argument("-p", dest="password", default=settings.netatmo_password, help="Netatmo password")
    parser.add_argument("-d", dest="device_id", default="", help="Device id (MAC address)")
    parser.add_argument("-m", dest="module_id", default="", help="Module id (MAC address)")
    parser.add_argument("-a", dest="minutes", type=int, default=-1, help="How many minutes ago")
    return parser


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    has_password_grant = all([args.client_id, args.client_secret, args.username, args.password])
    if not (has_password_grant or settings.netatmo_access_token):
        parser.print_usage(sys.stderr)
        return 2

    client = NetatmoClient(
        client_id=args.client_id,
        client_secret=args.client_secret,
        username=args.username,
        password=args.password,
        base_url=settings.netatmo_base_url,
        token_url=settings.netatmo_token_url,
        scope=settings.netatmo_scope,
        timeout=settings.request_timeout,
        access_token=settings.netatmo_access_token,
    )

    if not args.device_id:
        devices, user = client.get_stations_data()
        print_stations(devices, user, out)
        return 0

    module_id = args.module_id or args.device_id

    if args.minutes > 0:
        end = int(time.time())
        begin = end - args.minutes * 60
        measures = client.get_measure_by_time_range(args.device_id, module_id, begin, end)
        print_measures(measures, out)
        return 0

    newest: Optional[Measure] = client.get_measure_by_newest(args.device_id, module_id)
    if newest is None:
        print("No Data", file=out)
    else:
        print_measures(MeasureSet([newest]), out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
