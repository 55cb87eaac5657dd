#!/usr/bin/env python3
"""
Walk through the data models, mock providers and sensor service.
Prints each example to stdout.
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.mocks.mock_provider import (
    mock_accelerometer_at_rest,
    mock_gps_san_francisco,
    mock_magnetometer_southwest,
    mock_pressure_sea_level,
    mock_temperature_comfortable,
    mock_wifi_networks,
)
from core.models.sensor_data import AccelerometerData
from core.models.sensor_error import DataError, SensorError
from core.processing.compass import calculate_heading, get_cardinal_direction
from core.services.sensor_service import sensor_service


def _report(validate, data) -> None:
    try:
        validate(data)
        print("   ✓ Data is valid\n")
    except SensorError as e:
        print(f"   ✗ Error: {e}\n")


if __name__ == "__main__":
    print("=== Mobile Sensor Backend - Example Usage ===\n")

    print("1. Accelerometer:")
    accel_data = mock_accelerometer_at_rest()
    print(f"   Raw Data: X={accel_data.x}, Y={accel_data.y}, Z={accel_data.z}")
    print(f"   Formatted: {sensor_service.format_accelerometer(accel_data)}")
    print(f"   Magnitude: {sensor_service.calculate_acceleration_magnitude(accel_data):.2f} m/s²")
    _report(sensor_service.validate_accelerometer, accel_data)

    print("2. Magnetometer:")
    mag_data = mock_magnetometer_southwest()
    heading = calculate_heading(mag_data.x, mag_data.y)
    print(f"   Calculated Heading: {heading:.1f}° ({get_cardinal_direction(heading)})")
    print(f"   Formatted: {sensor_service.format_heading(mag_data)}\n")

    print("3. GPS:")
    gps_data = mock_gps_san_francisco()
    print(f"   Formatted: {sensor_service.format_gps(gps_data)}")
    print(f"   {sensor_service.format_gps_details(gps_data)}")
    _report(sensor_service.validate_gps, gps_data)

    print("4. Pressure:")
    pressure_data = mock_pressure_sea_level()
    print(f"   Formatted: {sensor_service.format_pressure(pressure_data)}")
    _report(sensor_service.validate_pressure, pressure_data)

    print("5. Temperature:")
    temp_data = mock_temperature_comfortable()
    print(f"   Formatted: {sensor_service.format_temperature(temp_data)}")
    _report(sensor_service.validate_temperature, temp_data)

    print("6. WiFi Scanner:")
    wifi_networks = mock_wifi_networks()
    print(f"   Found {len(wifi_networks)} networks")
    sensor_service.sort_wifi_by_signal(wifi_networks)
    for network in wifi_networks:
        print(f"   • {sensor_service.format_wifi_network(network)}")
    print()

    print("7. JSON Serialization:")
    json_text = accel_data.to_json()
    print(f"   {json_text}")
    print(f"   Round-trip equal: {AccelerometerData.from_json(json_text) == accel_data}\n")

    print("8. Error Handling:")
    invalid_accel = AccelerometerData(x=100.0, y=0.0, z=0.0, timestamp=0, accuracy=3)
    try:
        sensor_service.validate_accelerometer(invalid_accel)
        print("   Unexpected: data is valid")
    except DataError as e:
        print(f"   ✓ Caught expected error: {e.message}")

    print("\n=== Example Complete ===")
