import logging

import pytest

from tripdistance.config import TripConfig
from tripdistance.decoder import decode_coordinate, parse_record_line
from tripdistance.errors import DecodeExhaustedError, MalformedLineError
from tripdistance.geometry import GeographicCoordinate, NVectorCoordinate
from tripdistance.grid import GridCoordinate


class TestDecodeCoordinate:

    def test_geographic(self):
        coord = decode_coordinate('{"latitude": 37.924782627013734, "longitude": -91.63306471017802}')
        assert coord == GeographicCoordinate(37.924782627013734, -91.63306471017802)

    def test_nvector(self):
        coord = decode_coordinate('{"x": -0.0228, "y": -0.7897, "z": 0.6131}')
        assert coord == NVectorCoordinate(-0.0228, -0.7897, 0.6131)

    def test_grid(self):
        coord = decode_coordinate(
            '{"easting": 500000, "northing": 0, "zone_number": 31, "zone_letter": "N"}'
        )
        assert isinstance(coord, GridCoordinate)
        assert coord.longitude_degrees() == pytest.approx(3.0)

    def test_field_order_does_not_matter(self):
        coord = decode_coordinate('{"longitude": 2, "latitude": 1}')
        assert coord == GeographicCoordinate(1.0, 2.0)

    def test_integers_are_numbers(self):
        coord = decode_coordinate('{"latitude": 0, "longitude": 1}')
        assert coord.to_position() == (0.0, 1.0)

    @pytest.mark.parametrize(
        "payload",
        [
            '{"latitude": 1, "longitude": 2, "x": 3}',
            '{"latitude": 1}',
            '{"latitude": "1", "longitude": 2}',
            '{"latitude": true, "longitude": 2}',
            '{"x": 1, "y": 2, "z": 3, "w": 4}',
            '{"x": 1, "y": 2}',
            '{"easting": 1, "northing": 2, "zone_number": 31, "zone_letter": 1}',
            '{"easting": 1, "northing": 2, "zone_number": 31}',
            "{}",
            "[0, 1]",
            "not json",
            "",
        ],
    )
    def test_unmatched_payloads_fail(self, payload):
        with pytest.raises(DecodeExhaustedError) as excinfo:
            decode_coordinate(payload)
        assert excinfo.value.text == payload
        assert len(excinfo.value.reasons) == 3

    @pytest.mark.parametrize(
        "number",
        ["NaN", "Infinity", "-Infinity", "1e999", "-1e999", "1" + "0" * 400],
    )
    def test_non_finite_numbers_fail(self, number):
        for payload in [
            f'{{"latitude": {number}, "longitude": 0}}',
            f'{{"x": 1, "y": {number}, "z": 0}}',
            f'{{"easting": {number}, "northing": 0, "zone_number": 31, "zone_letter": "N"}}',
        ]:
            with pytest.raises(DecodeExhaustedError) as excinfo:
                decode_coordinate(payload)
            assert len(excinfo.value.reasons) == 3

    def test_error_names_the_payload(self):
        with pytest.raises(DecodeExhaustedError, match="Cannot decode coordinate: nope"):
            decode_coordinate("nope")

    def test_reasons_follow_priority_order(self):
        with pytest.raises(DecodeExhaustedError) as excinfo:
            decode_coordinate('{"x": 1, "y": 2, "z": "3"}')
        assert excinfo.value.reasons == [
            "Too many fields for: GeographicCoordinate",
            'Wrong type for field: "z"',
            "Not enough fields for: GridCoordinate",
        ]

    def test_rejections_logged_when_debugging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tripdistance.decoder")
        decode_coordinate('{"x": 1, "y": 0, "z": 0}', TripConfig(debug=True))
        assert "GeographicCoordinate rejected" in caplog.text
        assert "NVectorCoordinate rejected" not in caplog.text

    def test_rejections_silent_without_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tripdistance.decoder")
        decode_coordinate('{"x": 1, "y": 0, "z": 0}', TripConfig(debug=False))
        assert "rejected" not in caplog.text


class TestParseRecordLine:

    def test_splits_id_and_payload(self):
        traveler_id, coord = parse_record_line('42\t{"latitude": 1.5, "longitude": 2.5}\n')
        assert traveler_id == 42
        assert coord == GeographicCoordinate(1.5, 2.5)

    def test_windows_line_ending(self):
        traveler_id, coord = parse_record_line('7\t{"latitude": 0, "longitude": 0}\r\n')
        assert traveler_id == 7

    def test_negative_id(self):
        traveler_id, _ = parse_record_line('-3\t{"latitude": 0, "longitude": 0}')
        assert traveler_id == -3

    @pytest.mark.parametrize(
        "line",
        [
            '1 {"latitude": 0, "longitude": 0}',
            "1\t",
            "1\t   ",
            "\n",
            "",
            'one\t{"latitude": 0, "longitude": 0}',
            '1.5\t{"latitude": 0, "longitude": 0}',
        ],
    )
    def test_malformed_lines(self, line):
        with pytest.raises(MalformedLineError):
            parse_record_line(line)

    def test_malformed_line_is_a_decode_failure(self):
        with pytest.raises(DecodeExhaustedError, match="on line 12"):
            parse_record_line("garbage", line_number=12)

    def test_bad_payload(self):
        with pytest.raises(DecodeExhaustedError) as excinfo:
            parse_record_line('1\t{"lat": 0, "lon": 0}')
        assert not isinstance(excinfo.value, MalformedLineError)
        assert excinfo.value.text == '{"lat": 0, "lon": 0}'
