"""
Tests for the sensor service: validation, calculations and display formatting.
"""
import logging
import re

import pytest

from core.mocks.mock_provider import (
    mock_accelerometer_at_rest,
    mock_gps_san_francisco,
    mock_magnetometer_north,
    mock_magnetometer_southwest,
    mock_pressure_sea_level,
    mock_temperature_comfortable,
    mock_wifi_networks,
)
from core.models.sensor_data import (
    AccelerometerData,
    GpsData,
    PressureData,
    TemperatureData,
    WifiNetwork,
)
from core.models.sensor_enum import SensorId
from core.models.sensor_error import DataError, SensorErrorKind
from core.models.snapshot import SensorSnapshot
from core.services.sensor_service import SensorService, sensor_service


def _accel(x: float, y: float, z: float) -> AccelerometerData:
    return AccelerometerData(x=x, y=y, z=z, timestamp=0, accuracy=3)


def _gps(latitude: float, longitude: float) -> GpsData:
    return GpsData(latitude=latitude, longitude=longitude, accuracy=10.0, timestamp=0)


def _network(ssid: str, rssi: int) -> WifiNetwork:
    return WifiNetwork(ssid=ssid, bssid="00:11:22:33:44:55", signal_strength=rssi, frequency=2412, security="WPA2")


class TestAccelerometer:
    """Test accelerometer validation, magnitude and formatting"""

    def test_validate_accelerometer_valid(self) -> None:
        sensor_service.validate_accelerometer(mock_accelerometer_at_rest())

    @pytest.mark.parametrize("x, y, z", [
        (20.0, 0.0, 0.0),
        (0.0, -20.0, 0.0),
        (20.0, 20.0, -20.0),
    ])
    def test_validate_accelerometer_boundary_is_valid(self, x, y, z) -> None:
        sensor_service.validate_accelerometer(_accel(x, y, z))

    @pytest.mark.parametrize("x, y, z", [
        (100.0, 0.0, 0.0),
        (0.0, 20.0001, 0.0),
        (0.0, 0.0, -20.5),
    ])
    def test_validate_accelerometer_invalid(self, x, y, z) -> None:
        with pytest.raises(DataError) as exc_info:
            sensor_service.validate_accelerometer(_accel(x, y, z))
        assert exc_info.value.kind == SensorErrorKind.DATA_ERROR
        assert exc_info.value.message == "Acceleration value out of range"

    def test_calculate_acceleration_magnitude(self) -> None:
        assert sensor_service.calculate_acceleration_magnitude(_accel(3.0, 4.0, 0.0)) == pytest.approx(5.0)

    def test_magnitude_at_rest_is_gravity(self) -> None:
        magnitude = sensor_service.calculate_acceleration_magnitude(mock_accelerometer_at_rest())
        assert magnitude == pytest.approx(9.81)

    def test_format_accelerometer(self) -> None:
        formatted = sensor_service.format_accelerometer(mock_accelerometer_at_rest())
        assert formatted == "X: 0.00 m/s², Y: 9.81 m/s², Z: 0.00 m/s²"


class TestGps:
    """Test GPS validation and formatting"""

    def test_validate_gps_valid(self) -> None:
        sensor_service.validate_gps(mock_gps_san_francisco())

    @pytest.mark.parametrize("latitude, longitude", [
        (90.0, 180.0),
        (-90.0, -180.0),
        (0.0, 0.0),
    ])
    def test_validate_gps_boundaries(self, latitude, longitude) -> None:
        sensor_service.validate_gps(_gps(latitude, longitude))

    @pytest.mark.parametrize("latitude, longitude, message", [
        (95.0, 0.0, "Invalid latitude"),
        (-90.0001, 0.0, "Invalid latitude"),
        (0.0, 180.5, "Invalid longitude"),
        (0.0, -181.0, "Invalid longitude"),
        (91.0, 200.0, "Invalid latitude"),
    ])
    def test_validate_gps_invalid(self, latitude, longitude, message) -> None:
        with pytest.raises(DataError) as exc_info:
            sensor_service.validate_gps(_gps(latitude, longitude))
        assert exc_info.value.message == message

    def test_format_gps(self) -> None:
        assert sensor_service.format_gps(mock_gps_san_francisco()) == "37.7749° N, 122.4194° W"

    def test_format_gps_southern_eastern(self) -> None:
        assert sensor_service.format_gps(_gps(-33.8688, 151.2093)) == "33.8688° S, 151.2093° E"

    def test_format_gps_zero_is_north_east(self) -> None:
        assert sensor_service.format_gps(_gps(0.0, 0.0)) == "0.0000° N, 0.0000° E"

    def test_format_gps_details(self) -> None:
        formatted = sensor_service.format_gps_details(mock_gps_san_francisco())
        assert formatted == "Altitude: 16.0 m, Accuracy: ±5.0 m, Speed: 0.0 m/s"

    def test_format_gps_details_missing_fields(self) -> None:
        formatted = sensor_service.format_gps_details(_gps(0.0, 0.0))
        assert formatted == "Altitude: N/A, Accuracy: ±10.0 m, Speed: 0.0 m/s"


class TestHeading:
    def test_format_heading_north(self) -> None:
        assert sensor_service.format_heading(mock_magnetometer_north()) == "0.0° (N)"

    def test_format_heading_southwest(self) -> None:
        assert sensor_service.format_heading(mock_magnetometer_southwest()) == "225.0° (SW)"


class TestPressure:
    def test_validate_pressure_valid(self) -> None:
        sensor_service.validate_pressure(mock_pressure_sea_level())

    @pytest.mark.parametrize("pressure", [800.0, 1100.0])
    def test_validate_pressure_boundaries(self, pressure) -> None:
        sensor_service.validate_pressure(PressureData(pressure=pressure, timestamp=0))

    @pytest.mark.parametrize("pressure", [799.9, 1100.1, 0.0])
    def test_validate_pressure_invalid(self, pressure) -> None:
        with pytest.raises(DataError) as exc_info:
            sensor_service.validate_pressure(PressureData(pressure=pressure, timestamp=0))
        assert exc_info.value.message == "Pressure out of range"

    @pytest.mark.parametrize("pressure, expected", [
        (1013.25, "1013.25 hPa (Normal)"),
        (950.0, "950.00 hPa (Low)"),
        (999.99, "999.99 hPa (Low)"),
        (1000.0, "1000.00 hPa (Normal)"),
        (1020.0, "1020.00 hPa (Normal)"),
        (1030.5, "1030.50 hPa (High)"),
    ])
    def test_format_pressure(self, pressure, expected) -> None:
        assert sensor_service.format_pressure(PressureData(pressure=pressure, timestamp=0)) == expected


class TestTemperature:
    def test_validate_temperature_valid(self) -> None:
        sensor_service.validate_temperature(mock_temperature_comfortable())

    @pytest.mark.parametrize("temperature", [-50.0, 100.0])
    def test_validate_temperature_boundaries(self, temperature) -> None:
        sensor_service.validate_temperature(TemperatureData(temperature=temperature, timestamp=0))

    @pytest.mark.parametrize("temperature", [-50.1, 100.1])
    def test_validate_temperature_invalid(self, temperature) -> None:
        with pytest.raises(DataError) as exc_info:
            sensor_service.validate_temperature(TemperatureData(temperature=temperature, timestamp=0))
        assert exc_info.value.message == "Temperature out of range"

    @pytest.mark.parametrize("temperature, expected", [
        (0.0, "0.0°C (32.0°F)"),
        (22.5, "22.5°C (72.5°F)"),
        (-40.0, "-40.0°C (-40.0°F)"),
        (100.0, "100.0°C (212.0°F)"),
    ])
    def test_format_temperature(self, temperature, expected) -> None:
        assert sensor_service.format_temperature(TemperatureData(temperature=temperature, timestamp=0)) == expected


class TestWifi:
    """Test WiFi sorting, signal descriptions and formatting"""

    def test_sort_wifi_by_signal(self) -> None:
        networks = mock_wifi_networks()
        sensor_service.sort_wifi_by_signal(networks)
        assert [n.signal_strength for n in networks] == [-45, -52, -68]

    def test_sort_wifi_is_in_place(self) -> None:
        networks = mock_wifi_networks()
        original = networks
        sensor_service.sort_wifi_by_signal(networks)
        assert networks is original
        assert networks[0].ssid == "MyHomeWiFi"
        assert networks[-1].ssid == "Neighbor_5G"

    def test_sort_wifi_ties_keep_order(self) -> None:
        networks = [_network("A", -50), _network("B", -40), _network("C", -50)]
        sensor_service.sort_wifi_by_signal(networks)
        assert [n.ssid for n in networks] == ["B", "A", "C"]

    def test_sort_empty_list(self) -> None:
        networks = []
        sensor_service.sort_wifi_by_signal(networks)
        assert networks == []

    @pytest.mark.parametrize("rssi, expected", [
        (-45, "Excellent"),
        (-50, "Excellent"),
        (-51, "Good"),
        (-55, "Good"),
        (-60, "Good"),
        (-65, "Fair"),
        (-70, "Fair"),
        (-71, "Weak"),
        (-80, "Weak"),
    ])
    def test_get_signal_description(self, rssi, expected) -> None:
        assert sensor_service.get_signal_description(rssi) == expected

    @pytest.mark.parametrize("rssi, expected", [
        (-45, "▂▃▅▆█"),
        (-55, "▂▃▅▆_"),
        (-65, "▂▃▅__"),
        (-90, "▂▃___"),
    ])
    def test_get_signal_bars(self, rssi, expected) -> None:
        assert sensor_service.get_signal_bars(rssi) == expected

    def test_format_wifi_network(self) -> None:
        network = _network("TestWiFi", -45)
        assert sensor_service.format_wifi_network(network) == "TestWiFi - Excellent (-45 dBm) - WPA2"

    def test_format_wifi_details(self) -> None:
        networks = mock_wifi_networks()
        assert sensor_service.format_wifi_details(networks[0]) == "WPA2 • 2.4 GHz"
        assert sensor_service.format_wifi_details(networks[1]) == "WPA3 • 5.2 GHz"


class TestFormatTimestamp:
    NOW = 1_700_000_000_000

    def test_seconds_ago(self) -> None:
        assert sensor_service.format_timestamp(self.NOW - 12_000, now=self.NOW) == "12s ago"

    def test_just_now(self) -> None:
        assert sensor_service.format_timestamp(self.NOW, now=self.NOW) == "0s ago"

    def test_future_timestamp_clamps_to_zero(self) -> None:
        assert sensor_service.format_timestamp(self.NOW + 5_000, now=self.NOW) == "0s ago"

    def test_minutes_ago(self) -> None:
        assert sensor_service.format_timestamp(self.NOW - 60_000, now=self.NOW) == "1m ago"
        assert sensor_service.format_timestamp(self.NOW - 5 * 60_000 - 30_000, now=self.NOW) == "5m ago"

    def test_older_than_an_hour_shows_clock_time(self) -> None:
        formatted = sensor_service.format_timestamp(self.NOW - 3_600_000, now=self.NOW)
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", formatted)

    def test_defaults_to_current_time(self) -> None:
        assert sensor_service.format_timestamp(mock_pressure_sea_level().timestamp) == "0s ago"


class TestSnapshot:
    """Test snapshot-level validation and dashboard rendering"""

    def test_validate_snapshot_all_valid(self) -> None:
        snapshot = SensorSnapshot(
            timestamp=0,
            accelerometer=mock_accelerometer_at_rest(),
            magnetometer=mock_magnetometer_north(),
            gps=mock_gps_san_francisco(),
            pressure=mock_pressure_sea_level(),
            temperature=mock_temperature_comfortable(),
            wifi=mock_wifi_networks(),
        )
        assert sensor_service.validate_snapshot(snapshot) == []

    def test_validate_empty_snapshot(self) -> None:
        assert sensor_service.validate_snapshot(SensorSnapshot(timestamp=0)) == []

    def test_validate_snapshot_collects_issues(self, caplog) -> None:
        snapshot = SensorSnapshot(
            timestamp=0,
            accelerometer=_accel(100.0, 0.0, 0.0),
            gps=mock_gps_san_francisco(),
            temperature=TemperatureData(temperature=150.0, timestamp=0),
        )
        with caplog.at_level(logging.WARNING):
            issues = sensor_service.validate_snapshot(snapshot)

        assert [issue.sensor_id for issue in issues] == [SensorId.ACCELEROMETER, SensorId.TEMPERATURE]
        assert all(issue.kind == SensorErrorKind.DATA_ERROR for issue in issues)
        assert issues[1].message == "Temperature out of range"
        assert "ACCELEROMETER failed validation" in caplog.text

    def test_format_snapshot_uses_display_names(self) -> None:
        snapshot = SensorSnapshot(timestamp=0, pressure=mock_pressure_sea_level())
        assert sensor_service.format_snapshot(snapshot) == ["Barometer: 1013.25 hPa (Normal)"]

    def test_format_snapshot_full(self) -> None:
        snapshot = SensorSnapshot(
            timestamp=0,
            accelerometer=mock_accelerometer_at_rest(),
            magnetometer=mock_magnetometer_southwest(),
            gps=mock_gps_san_francisco(),
            temperature=mock_temperature_comfortable(),
            wifi=mock_wifi_networks(),
        )
        lines = sensor_service.format_snapshot(snapshot)
        assert lines[0] == "Accelerometer: X: 0.00 m/s², Y: 9.81 m/s², Z: 0.00 m/s² | 9.81 m/s²"
        assert lines[1] == "Compass: 225.0° (SW)"
        assert lines[2].startswith("GPS: 37.7749° N, 122.4194° W | Altitude: 16.0 m")
        assert lines[3] == "Temperature: 22.5°C (72.5°F)"
        assert lines[4] == "WiFi: ▂▃▅▆█ MyHomeWiFi - Excellent (-45 dBm) - WPA2 (WPA2 • 2.4 GHz)"
        assert [line.split(" - ")[0].split()[-1] for line in lines[4:]] == [
            "MyHomeWiFi", "CoffeeShop-Guest", "Neighbor_5G",
        ]

    def test_format_snapshot_does_not_reorder_input(self) -> None:
        snapshot = SensorSnapshot(timestamp=0, wifi=mock_wifi_networks())
        sensor_service.format_snapshot(snapshot)
        assert [n.ssid for n in snapshot.wifi] == ["MyHomeWiFi", "Neighbor_5G", "CoffeeShop-Guest"]


def test_service_is_stateless() -> None:
    """Separate instances give identical results"""
    data = mock_accelerometer_at_rest()
    assert SensorService().format_accelerometer(data) == sensor_service.format_accelerometer(data)
