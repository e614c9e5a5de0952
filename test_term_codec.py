"""
Test Term Conversion (Without a Host Process)
=============================================

Exercises the host boundary with plain Python terms and JSON payloads:
decode validation, encode, round trips, the codec's logging and counters,
and YAML configuration.

Usage:
    pytest test_term_codec.py
"""

import json
import logging

import pytest
import yaml

from exshape_shape import Polygon, Ring
from exshape_term import (
    BadArgError,
    CodecConfig,
    DecodeFailure,
    DecodeResult,
    EmptyPolygonError,
    LogEvent,
    PolygonCodec,
    PolygonTerm,
    RingTerm,
    create_logger,
    decode_polygon,
    encode_polygon,
)

R1 = [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]
R2 = [[2, 2], [4, 2], [4, 4], [2, 2]]
R3 = [[6, 6], [8, 6], [8, 8], [6, 6]]


def _codec(component: str, **config) -> PolygonCodec:
    return PolygonCodec(config=CodecConfig(component=component, **config))


def _events(caplog) -> list:
    return [json.loads(record.getMessage())["event"] for record in caplog.records]


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

def test_decode_three_rings():
    """A three-ring term decodes in order with R1 as the primary ring."""
    polygon = decode_polygon([R1, R2, R3])

    assert isinstance(polygon, Polygon)
    assert polygon.ring_count == 3
    assert polygon.first_ring == Ring.from_points(R1)
    assert polygon.rings == (
        Ring.from_points(R1),
        Ring.from_points(R2),
        Ring.from_points(R3),
    )
    print("✓ Three-ring term decoded in order")


def test_decode_empty_rejected():
    """An empty term is an invalid argument and produces no polygon."""
    with pytest.raises(EmptyPolygonError) as exc_info:
        decode_polygon([])

    assert isinstance(exc_info.value, BadArgError)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.reason == DecodeFailure.EMPTY_SEQUENCE

    result = PolygonTerm.try_decode(())
    assert not result.ok
    assert result.value is None
    assert result.failure == DecodeFailure.EMPTY_SEQUENCE
    print("✓ Empty term rejected")


@pytest.mark.parametrize("term", [None, 42, "rings", b"rings", {"rings": [R1]}])
def test_decode_not_a_sequence(term):
    with pytest.raises(BadArgError) as exc_info:
        decode_polygon(term)
    assert exc_info.value.reason == DecodeFailure.NOT_A_SEQUENCE
    assert not isinstance(exc_info.value, EmptyPolygonError)


def test_decode_bad_ring_names_index():
    """A malformed ring fails the whole polygon and names the ring."""
    result = PolygonTerm.try_decode([R1, "oops", R3])

    assert result.failure == DecodeFailure.BAD_RING
    assert "ring 1" in result.detail

    with pytest.raises(BadArgError) as exc_info:
        decode_polygon([R1, [[0, 0], [1]], R3])
    assert exc_info.value.reason == DecodeFailure.BAD_RING
    assert "ring 1" in str(exc_info.value)


def test_ring_term_point_validation():
    assert RingTerm.try_decode([[0, 0], [1, "x"]]).failure == DecodeFailure.BAD_POINT
    assert RingTerm.try_decode([[0, 0, 0]]).failure == DecodeFailure.BAD_POINT
    assert RingTerm.try_decode([[True, 0]]).failure == DecodeFailure.BAD_POINT
    assert RingTerm.try_decode(7).failure == DecodeFailure.BAD_RING

    term = RingTerm.decode(((0, 0), [1.5, 2]))
    assert term.points == ((0.0, 0.0), (1.5, 2.0))
    assert term.point_count == 2


def test_decode_huge_integer_coordinate_rejected():
    """Integers too large for a float are a bad point, not an overflow."""
    result = PolygonTerm.try_decode([[[10 ** 400, 0]]])

    assert not result.ok
    assert result.failure == DecodeFailure.BAD_RING
    assert "point 0" in result.detail

    assert RingTerm.try_decode([[0, -10 ** 400]]).failure == DecodeFailure.BAD_POINT
    with pytest.raises(BadArgError):
        decode_polygon([R1, [[10 ** 400, 0]]])


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_decode_non_finite_coordinate_rejected(value):
    result = RingTerm.try_decode([[0, 0], [value, 1]])
    assert result.failure == DecodeFailure.BAD_POINT

    with pytest.raises(BadArgError) as exc_info:
        decode_polygon([[[0, 0], [1, value]]])
    assert exc_info.value.reason == DecodeFailure.BAD_RING


def test_ring_level_rules_left_to_ring():
    """Open and empty rings pass the polygon layer untouched."""
    polygon = decode_polygon([[], [[0, 0], [1, 0], [1, 1]]])

    assert polygon.first_ring.point_count == 0
    assert not polygon.rings[1].is_closed


def test_encode_is_json_compatible():
    polygon = Polygon.from_rings([Ring.from_points(R1), Ring.from_points(R2)])
    term = encode_polygon(polygon)

    assert term == [
        [[float(x), float(y)] for x, y in R1],
        [[float(x), float(y)] for x, y in R2],
    ]
    assert all(type(c) is float for ring in term for point in ring for c in point)
    assert json.loads(json.dumps(term)) == term


def test_round_trip_preserves_rings():
    """decode(encode(p)) reproduces p."""
    polygon = Polygon.from_rings([
        Ring.from_points([(0.25, -1.5), (3.0, 4.125), (0.25, -1.5)]),
        Ring.from_points(R2),
    ])

    assert decode_polygon(encode_polygon(polygon)) == polygon
    print("✓ Round trip preserves ring sequence")


def test_built_polygon_encodes_like_decoded_one():
    """Promote + append gives the same term as decoding the full sequence."""
    built = Polygon.from_ring(Ring.from_points(R1))
    built.append(Ring.from_points(R2))
    built.append(Ring.from_points(R3))

    decoded = decode_polygon([R1, R2, R3])
    assert encode_polygon(built) == encode_polygon(decoded)


def test_polygon_term_invariant():
    with pytest.raises(EmptyPolygonError):
        PolygonTerm(rings=())


def test_decode_result_contract():
    with pytest.raises(ValueError):
        DecodeResult()
    with pytest.raises(ValueError):
        DecodeResult(value=1, failure=DecodeFailure.BAD_RING)

    assert DecodeResult.success(5).unwrap() == 5
    assert DecodeResult.success(5).to_error() is None

    error = DecodeResult.fail(DecodeFailure.NOT_JSON, "bad").to_error()
    assert type(error) is BadArgError
    assert error.detail == "bad"


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------

def test_codec_decode_encode_and_stats():
    codec = _codec("test_codec_stats")

    polygon = codec.decode([R1, R2])
    term = codec.encode(polygon)
    assert codec.decode(term) == polygon

    with pytest.raises(EmptyPolygonError):
        codec.decode([])

    assert codec.get_stats() == {'decoded': 2, 'encoded': 1, 'rejected': 1}
    print("✓ Codec counters track conversions")


def test_codec_logs_rejection_and_reraises(caplog):
    codec = _codec("test_codec_reject")

    with caplog.at_level(logging.WARNING, logger="exshape_term.test_codec_reject"):
        with pytest.raises(EmptyPolygonError):
            codec.decode([])
        with pytest.raises(BadArgError):
            codec.decode("nope")

    assert _events(caplog) == [
        LogEvent.EMPTY_POLYGON.value,
        LogEvent.DECODE_REJECTED.value,
    ]
    entry = json.loads(caplog.records[1].getMessage())
    assert entry["component"] == "test_codec_reject"
    assert entry["metadata"]["reason"] == DecodeFailure.NOT_A_SEQUENCE.value


def test_codec_try_decode_returns_failure():
    codec = _codec("test_codec_try")

    result = codec.try_decode([])
    assert not result.ok
    assert result.failure == DecodeFailure.EMPTY_SEQUENCE

    result = codec.try_decode([R1])
    assert result.ok
    assert result.value.first_ring == Ring.from_points(R1)


def test_codec_debug_conversion_events(caplog):
    codec = _codec("test_codec_debug", log_level="DEBUG", log_conversions=True)

    with caplog.at_level(logging.DEBUG, logger="exshape_term.test_codec_debug"):
        codec.encode(codec.decode([R1, R2]))

    assert _events(caplog) == [
        LogEvent.POLYGON_DECODED.value,
        LogEvent.POLYGON_ENCODED.value,
    ]
    entry = json.loads(caplog.records[0].getMessage())
    assert entry["metadata"]["ring_count"] == 2


def test_codec_quiet_by_default(caplog):
    codec = _codec("test_codec_quiet")

    with caplog.at_level(logging.DEBUG, logger="exshape_term.test_codec_quiet"):
        codec.encode(codec.decode([R1]))

    assert caplog.records == []


def test_codec_json_payloads():
    codec = _codec("test_codec_json", json_indent=2)
    polygon = codec.decode([R1, R2, R3])

    text = codec.dumps(polygon)
    assert "\n" in text
    assert codec.loads(text) == polygon
    assert codec.loads(text.encode("utf-8")) == polygon


def test_codec_rejects_bad_json(caplog):
    codec = _codec("test_codec_badjson")

    with caplog.at_level(logging.WARNING, logger="exshape_term.test_codec_badjson"):
        with pytest.raises(BadArgError) as exc_info:
            codec.loads("[[[0, 0]")
        with pytest.raises(BadArgError):
            codec.loads(b"\xff\xfe")

    assert exc_info.value.reason == DecodeFailure.NOT_JSON
    assert _events(caplog) == [LogEvent.DESERIALIZATION_ERROR.value] * 2
    entry = json.loads(caplog.records[0].getMessage())
    assert entry["exception"]["type"] == "JSONDecodeError"

    with pytest.raises(EmptyPolygonError):
        codec.loads("[]")
    assert codec.get_stats()['rejected'] == 3


def test_codec_rejects_out_of_range_coordinates(caplog):
    """Overflowing numbers in JSON or in terms are counted and logged rejections."""
    codec = _codec("test_codec_range")

    with caplog.at_level(logging.WARNING, logger="exshape_term.test_codec_range"):
        with pytest.raises(BadArgError) as exc_info:
            codec.loads("[[[1e999, 0]]]")
        with pytest.raises(BadArgError):
            codec.decode([[[10 ** 400, 0]]])

    assert exc_info.value.reason == DecodeFailure.BAD_RING
    assert _events(caplog) == [LogEvent.DECODE_REJECTED.value] * 2
    assert codec.get_stats()["rejected"] == 2


def test_codec_dumps_strict_json():
    """dumps output parses without NaN/Infinity extensions."""
    codec = _codec("test_codec_strict")
    polygon = codec.decode([[[0.1, -2.5e300], [1e-300, 3]]])

    def reject(token):
        raise ValueError(token)

    text = codec.dumps(polygon)
    assert json.loads(text, parse_constant=reject) == codec.encode(polygon)
    assert codec.loads(text) == polygon


def test_codec_uses_injected_logger():
    logger = create_logger("test_codec_injected")
    codec = PolygonCodec(logger=logger)

    assert codec.logger is logger
    assert codec.config == CodecConfig()


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_config_validation():
    assert CodecConfig().level == logging.INFO

    with pytest.raises(ValueError):
        CodecConfig(component="")
    with pytest.raises(ValueError):
        CodecConfig(log_level="LOUD")
    with pytest.raises(ValueError):
        CodecConfig(json_indent=-1)


def test_config_from_yaml(tmp_path):
    path = tmp_path / "codec.yaml"
    path.write_text(
        "component: host_bridge\n"
        "log_level: debug\n"
        "log_conversions: true\n"
        "json_indent: 4\n"
    )

    config = CodecConfig.from_yaml(path)
    assert config == CodecConfig(
        component="host_bridge",
        log_level="DEBUG",
        log_conversions=True,
        json_indent=4,
    )
    assert config.level == logging.DEBUG


def test_config_from_yaml_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        CodecConfig.from_yaml(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("component: [unclosed\n")
    with pytest.raises(ValueError) as exc_info:
        CodecConfig.from_yaml(broken)
    assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        CodecConfig.from_yaml(listing)

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert CodecConfig.from_yaml(empty) == CodecConfig()


def test_codec_from_config_file(tmp_path, caplog):
    path = tmp_path / "codec.yaml"
    path.write_text("component: test_codec_file\n")

    with caplog.at_level(logging.INFO, logger="exshape_term.test_codec_file"):
        codec = PolygonCodec.from_config_file(path)

    assert codec.config.component == "test_codec_file"
    assert _events(caplog) == [LogEvent.CONFIG_LOADED.value]


def main():
    """Run the tests that need no pytest fixtures."""
    print("\n🔷 exshape_term - Term Conversion Tests")
    print("=" * 60)

    test_decode_three_rings()
    test_decode_empty_rejected()
    test_decode_bad_ring_names_index()
    test_ring_term_point_validation()
    test_decode_huge_integer_coordinate_rejected()
    test_ring_level_rules_left_to_ring()
    test_encode_is_json_compatible()
    test_round_trip_preserves_rings()
    test_built_polygon_encodes_like_decoded_one()
    test_polygon_term_invariant()
    test_decode_result_contract()
    test_codec_decode_encode_and_stats()
    test_codec_try_decode_returns_failure()
    test_codec_json_payloads()
    test_codec_dumps_strict_json()
    test_codec_uses_injected_logger()
    test_config_validation()

    print("\n" + "=" * 60)
    print("✅ ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
