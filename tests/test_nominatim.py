import pytest
import requests
from unittest.mock import MagicMock, patch

from src.geocoding.exceptions import HttpError, InvalidCoordinates, RateLimited, TransportError
from src.geocoding.nominatim import (
    NOMINATIM_BASE_URL,
    get_address_from_coordinates,
    parse_address,
    to_float,
    valid_coordinates,
)


def make_response(status_code=200, body=None, reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = body if body is not None else {}
    return response


class TestParseAddress:
    def test_display_name_wins_over_address_parts(self):
        data = {"display_name": "X", "address": {"road": "Main St", "country": "USA"}}
        assert parse_address(data) == "X"

    def test_composes_from_parts_in_order(self):
        data = {"address": {"road": "Main St", "city": "Springfield", "country": "USA"}}
        assert parse_address(data) == "Main St, Springfield, USA"

    def test_full_composition_with_fallback_keys(self):
        data = {
            "address": {
                "house_number": "12",
                "road": "High Street",
                "village": "Little Whinging",
                "province": "Surrey",
                "postcode": "KT1 1AA",
                "country": "United Kingdom",
            }
        }
        assert parse_address(data) == "12 High Street, Little Whinging, Surrey, KT1 1AA, United Kingdom"

    def test_house_number_without_road_is_trimmed(self):
        assert parse_address({"address": {"house_number": "7", "town": "Oakville"}}) == "7, Oakville"

    def test_city_preferred_over_town(self):
        assert parse_address({"address": {"city": "A", "town": "B"}}) == "A"

    def test_error_body(self):
        assert parse_address({"error": "Unable to geocode"}) == "No address found"

    def test_no_address_information(self):
        assert parse_address({"place_id": 1}) == "Address not found"
        assert parse_address({"address": {}}) == "Address not found"

    def test_no_hidden_state(self):
        data = {"address": {"road": "Main St", "country": "USA"}}
        assert parse_address(data) == parse_address(data)
        assert data == {"address": {"road": "Main St", "country": "USA"}}


class TestCoordinates:
    @pytest.mark.parametrize("value, expected", [
        ("40.7128", 40.7128),
        (" -74.006", -74.006),
        ("12abc", 12.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        (3, 3.0),
    ])
    def test_to_float(self, value, expected):
        assert to_float(value) == expected

    def test_bounds_are_inclusive(self):
        assert valid_coordinates(90, 180)
        assert valid_coordinates(-90, -180)
        assert not valid_coordinates(90.5, 0)
        assert not valid_coordinates(0, -180.1)


class TestGetAddressFromCoordinates:
    def test_success_sends_expected_request(self):
        with patch("src.geocoding.nominatim.requests.get") as mock_get:
            mock_get.return_value = make_response(body={"display_name": "Eiffel Tower, Paris"})

            address = get_address_from_coordinates(48.8584, 2.2945)

        assert address == "Eiffel Tower, Paris"
        args, kwargs = mock_get.call_args
        assert args[0] == NOMINATIM_BASE_URL
        assert kwargs["params"] == {
            "format": "json",
            "lat": 48.8584,
            "lon": 2.2945,
            "zoom": 18,
            "addressdetails": 1,
        }
        assert kwargs["headers"]["User-Agent"]

    @pytest.mark.parametrize("lat, lon", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_invalid_coordinates_skip_request(self, lat, lon):
        with patch("src.geocoding.nominatim.requests.get") as mock_get:
            with pytest.raises(InvalidCoordinates) as exc_info:
                get_address_from_coordinates(lat, lon)

        assert not mock_get.called
        assert str(exc_info.value).startswith("Invalid coordinates:")

    def test_rate_limited(self):
        with patch("src.geocoding.nominatim.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=429, reason="Too Many Requests")
            with pytest.raises(RateLimited, match="Rate limit exceeded"):
                get_address_from_coordinates(10, 10)

    def test_other_status_is_http_error(self):
        with patch("src.geocoding.nominatim.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=503, reason="Service Unavailable")
            with pytest.raises(HttpError) as exc_info:
                get_address_from_coordinates(10, 10)

        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "HTTP Error: 503 - Service Unavailable"

    def test_network_failure_is_transport_error(self):
        with patch("src.geocoding.nominatim.requests.get") as mock_get:
            mock_get.side_effect = requests.ConnectionError("connection refused")
            with pytest.raises(TransportError, match="connection refused"):
                get_address_from_coordinates(10, 10)

    def test_timeout_is_transport_error(self):
        with patch("src.geocoding.nominatim.requests.get") as mock_get:
            mock_get.side_effect = requests.Timeout("read timed out")
            with pytest.raises(TransportError):
                get_address_from_coordinates(10, 10)

    def test_bad_json_is_transport_error(self):
        response = make_response()
        response.json.side_effect = ValueError("Expecting value")
        with patch("src.geocoding.nominatim.requests.get", return_value=response):
            with pytest.raises(TransportError, match="Invalid JSON"):
                get_address_from_coordinates(10, 10)
