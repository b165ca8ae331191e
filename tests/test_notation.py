import pytest

from tonecore.time.notation import TimeParseError, parse_time

BPM = 120.0
Q = 0.5


def test_plain_number():
    assert parse_time("1.5", BPM) == 1.5
    assert parse_time("0", BPM) == 0.0


@pytest.mark.parametrize(
    "notation, factor",
    [("1n", 4.0), ("2n", 2.0), ("4n", 1.0), ("8n", 0.5), ("16n", 0.25)],
)
def test_note_values(notation, factor):
    assert parse_time(notation, BPM) == pytest.approx(Q * factor, abs=1e-10)


def test_triplet():
    assert parse_time("4t", BPM) == pytest.approx(Q * (2.0 / 3.0), abs=1e-10)
    assert parse_time("8t", BPM) == pytest.approx(Q * 0.5 * (2.0 / 3.0), abs=1e-10)


def test_dotted():
    assert parse_time("4n.", BPM) == pytest.approx(Q * 1.5, abs=1e-10)


def test_bbs():
    assert parse_time("1:0:0", BPM) == pytest.approx(2.0, abs=1e-10)
    assert parse_time("0:1:0", BPM) == pytest.approx(Q, abs=1e-10)
    assert parse_time("1:2:1", BPM) == pytest.approx((4.0 + 2.0 + 0.25) * Q, abs=1e-10)
    assert parse_time("1:2", BPM) == pytest.approx((4.0 + 2.0) * Q, abs=1e-10)


def test_hz():
    assert parse_time("2hz", BPM) == pytest.approx(0.5, abs=1e-10)
    assert parse_time("4hz", BPM) == pytest.approx(0.25, abs=1e-10)


@pytest.mark.parametrize("notation", ["", "xyz", "0hz"])
def test_invalid(notation):
    with pytest.raises(TimeParseError):
        parse_time(notation, BPM)


def test_error_message():
    with pytest.raises(TimeParseError) as info:
        parse_time("xyz", BPM)
    assert "xyz" in str(info.value)


def test_tempo_scales_note_values():
    assert parse_time("4n", 60.0) == pytest.approx(1.0, abs=1e-10)
    assert parse_time("4n", 120.0) == pytest.approx(0.5, abs=1e-10)