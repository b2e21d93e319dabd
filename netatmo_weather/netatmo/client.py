"""
Netatmo Weather API client.

Acquires an OAuth2 bearer token with the password grant and fetches station
metadata and measurement series.

Endpoints:
- /api/getstationsdata: devices, modules and newest dashboard readings
- /api/getmeasure: measurement series for one device/module

getmeasure rows are decoded by netatmo_weather.netatmo.decoding; the ``type``
parameter is always built from MEASUREMENT_TYPES so request and decoder agree
on column order.

API Docs: https://dev.netatmo.com/apidocumentation/weather
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from netatmo_weather.config import (
    DEFAULT_SCALE,
    MEASUREMENT_TYPES,
    Settings,
    build_type_string,
    validate_scale,
)
from netatmo_weather.netatmo.decoding import decode_measure_response
from netatmo_weather.netatmo.exceptions import NetatmoAuthError
from netatmo_weather.netatmo.measures import Measure, MeasureSet
from netatmo_weather.netatmo.schemas import Device, GetStationsDataResponse, User

logger = logging.getLogger(__name__)


class NetatmoClient:
    """Client for the Netatmo Weather API."""

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        username: str = "",
        password: str = "",
        base_url: str = "https://api.netatmo.com",
        token_url: str = "https://api.netatmo.com/oauth2/token",
        scope: str = "read_station",
        timeout: float = 30.0,
        access_token: Optional[str] = None,
    ):
        """
        Initialize Netatmo client.

        Args:
            client_id: OAuth client ID of the Netatmo app
            client_secret: OAuth client secret of the Netatmo app
            username: Netatmo account e-mail
            password: Netatmo account password
            base_url: Base URL for the API
            token_url: OAuth2 token endpoint
            scope: OAuth scope (default: read_station)
            timeout: Request timeout in seconds
            access_token: Pre-issued bearer token; skips the password grant
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.username = username
        self.password = password
        self.base_url = base_url.rstrip("/")
        self.token_url = token_url
        self.scope = scope
        self.timeout = timeout
        self.access_token: Optional[str] = None

        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        if access_token:
            self._set_token(access_token)

        logger.info(f"Netatmo client initialized: {self.base_url}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "NetatmoClient":
        """Build a client from application settings."""
        return cls(
            client_id=settings.netatmo_client_id,
            client_secret=settings.netatmo_client_secret,
            username=settings.netatmo_username,
            password=settings.netatmo_password,
            base_url=settings.netatmo_base_url,
            token_url=settings.netatmo_token_url,
            scope=settings.netatmo_scope,
            timeout=settings.request_timeout,
            access_token=settings.netatmo_access_token,
        )

    def _set_token(self, access_token: str) -> None:
        self.access_token = access_token
        self.session.headers["Authorization"] = f"Bearer {access_token}"

    def authenticate(self) -> str:
        """
        Obtain an access token with the OAuth2 password grant.

        Returns:
            The access token, also installed on the session

        Raises:
            NetatmoAuthError: If the token endpoint rejects the request or
                replies without an access_token
        """
        data = {
            "grant_type": "password",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "username": self.username,
            "password": self.password,
            "scope": self.scope,
        }

        logger.info(f"Requesting Netatmo access token for {self.username}")

        try:
            response = requests.post(self.token_url, data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error requesting Netatmo token: {e}")
            raise NetatmoAuthError(f"Netatmo token request failed: {e}") from e

        if response.status_code >= 400:
            raise NetatmoAuthError(f"Netatmo token request failed: {response.status_code}")

        payload: Dict[str, Any] = response.json()
        access_token = payload.get("access_token")
        if not access_token:
            raise NetatmoAuthError("Netatmo token response missing access_token")

        self._set_token(str(access_token))
        return self.access_token

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """
        Make an authenticated GET request.

        Returns:
            Raw response body

        Raises:
            requests.HTTPError: On non-2xx responses
        """
        if self.access_token is None:
            self.authenticate()

        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching {url}: {e}")
            raise

    def get_stations_data(self) -> Tuple[List[Device], User]:
        """
        Get stations owned by the account.

        Returns:
            (devices, user)
        """
        logger.info("Fetching stations data")
        content = self._get("/api/getstationsdata")
        response = GetStationsDataResponse.model_validate_json(content)
        return response.body.devices, response.body.user

    def _measure_params(self, device_id: str, module_id: str, scale: str) -> Dict[str, Any]:
        return {
            "device_id": device_id,
            "module_id": module_id,
            "scale": validate_scale(scale),
            "type": build_type_string(MEASUREMENT_TYPES),
        }

    def get_measure_by_time_range(
        self,
        device_id: str,
        module_id: str,
        begin: int,
        end: int,
        scale: str = DEFAULT_SCALE,
    ) -> MeasureSet:
        """
        Get measures between two Unix timestamps.

        Args:
            device_id: Station MAC address
            module_id: Module MAC address (the device ID for the main module)
            begin: Start of window (Unix seconds)
            end: End of window (Unix seconds)
            scale: Aggregation scale (default: max)

        Returns:
            MeasureSet in time order (empty when the window has no data)
        """
        params = self._measure_params(device_id, module_id, scale)
        params.update({
            "real_time": "true",
            "date_begin": begin,
            "date_end": end,
        })

        logger.info(f"Fetching measures for {device_id}/{module_id} from {begin} to {end}")
        content = self._get("/api/getmeasure", params=params)
        measures = decode_measure_response(content, device_id, module_id)

        if not measures:
            logger.warning(f"No measures returned for {device_id}/{module_id}")
        else:
            logger.info(f"Fetched {len(measures)} measures")

        return measures

    def get_measure_by_newest(
        self,
        device_id: str,
        module_id: str,
        scale: str = DEFAULT_SCALE,
    ) -> Optional[Measure]:
        """
        Get the most recent measure.

        Returns:
            Newest Measure, or None if the API has no data
        """
        params = self._measure_params(device_id, module_id, scale)
        params["date_end"] = "last"

        logger.info(f"Fetching newest measure for {device_id}/{module_id}")
        content = self._get("/api/getmeasure", params=params)
        return decode_measure_response(content, device_id, module_id).newest()
