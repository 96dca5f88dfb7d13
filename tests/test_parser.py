import datetime as dt

import pytest

from kandilli_quake.exceptions import ParseError, TimezoneResolutionError
from kandilli_quake.models import to_float32
from kandilli_quake.parser import LINE_PATTERN, RecordParser, iter_candidate_lines

LINE = "2023.05.01 12:30:00   38.1234   27.5678   8.50  -.- 4.8 -.- Izmir-Bornova (AA)"


def _fields(**overrides):
    fields = LINE_PATTERN.search(LINE).groupdict()
    fields.update(overrides)
    return fields


def test_parse_well_formed_line(utc_parser):
    rec = utc_parser.parse(LINE)

    assert rec.location == "Izmir Bornova"
    assert rec.latitude == 38.1234
    assert rec.longitude == 27.5678
    assert rec.depth == 8.5
    assert rec.magnitude == to_float32(4.8)
    assert f"{rec.magnitude:.1f}" == "4.8"
    assert rec.occurred_at == dt.datetime(2023, 5, 1, 9, 30, tzinfo=dt.timezone.utc)
    assert rec.occurred_at.utcoffset() == dt.timedelta(0)


def test_time_is_read_in_istanbul_and_shown_in_local_zone():
    rec = RecordParser(local_tz="Asia/Tokyo").parse(LINE)

    assert rec.occurred_at.strftime("%Y-%m-%d %H:%M:%S") == "2023-05-01 18:30:00"


def test_local_zone_defaults_to_process_timezone():
    rec = RecordParser().parse(LINE)

    assert rec.occurred_at.tzinfo is not None
    assert rec.occurred_at == dt.datetime(2023, 5, 1, 9, 30, tzinfo=dt.timezone.utc)


def test_group_order_maps_depth_before_magnitude():
    m = LINE_PATTERN.search(LINE)

    assert m.group(5) == "8.50"
    assert m.group(6) == "4.8"
    assert m.group(7) == "Izmir"
    assert m.group(8) == "Bornova"


def test_single_word_location_has_no_trailing_space(utc_parser):
    rec = utc_parser.parse(
        "2023.05.01 10:15:42  40.7000   29.1000       12.3      -.-  3.1  -.-   MARMARA- (REVIZE01)"
    )

    assert rec.location == "MARMARA"


@pytest.mark.parametrize("line", [
    "Date       Time      Latit(N)  Long(E)   Depth(km)     MD   ML   Mw    Region",
    "---------- --------  --------  -------   ----------    ------------    -----------",
    "2023.05.01 12:30:00   38.1234   27.5678   8.50  -.- 4.8 -.- AKDENIZ (AA)",
    "",
])
def test_non_event_lines_do_not_match(line):
    assert LINE_PATTERN.search(line) is None


def test_iter_candidate_lines_skips_page_noise(sample_page):
    lines = [line for line, _ in iter_candidate_lines(sample_page)]

    assert len(lines) == 5
    assert lines[0] == LINE


def test_parse_is_repeatable(utc_parser):
    assert utc_parser.parse(LINE) == utc_parser.parse(LINE)
    assert RecordParser(local_tz="UTC").parse(LINE) == utc_parser.parse(LINE)


def test_invalid_calendar_date_raises(utc_parser):
    line = LINE.replace("2023.05.01", "2023.02.30")

    with pytest.raises(ParseError) as exc:
        utc_parser.parse(line)

    assert exc.value.field == "date"
    assert exc.value.raw == "2023.02.30 12:30:00"


def test_non_numeric_magnitude_raises(utc_parser):
    with pytest.raises(ParseError) as exc:
        utc_parser.parse_fields(_fields(magnitude="x.y"))

    assert exc.value.field == "magnitude"
    assert exc.value.raw == "x.y"


def test_non_numeric_latitude_raises(utc_parser):
    with pytest.raises(ParseError) as exc:
        utc_parser.parse_fields(_fields(latitude="N/A"))

    assert exc.value.field == "latitude"


def test_unmatched_line_raises(utc_parser):
    with pytest.raises(ParseError):
        utc_parser.parse("nothing to see here")


def test_unknown_local_timezone_is_a_parse_error():
    parser = RecordParser(local_tz="Mars/Olympus_Mons")

    with pytest.raises(TimezoneResolutionError) as exc:
        parser.parse(LINE)

    assert isinstance(exc.value, ParseError)
    assert exc.value.raw == "Mars/Olympus_Mons"


def test_unknown_source_timezone_is_a_parse_error():
    with pytest.raises(TimezoneResolutionError):
        RecordParser(source_tz="Nowhere/Atlantis", local_tz="UTC").parse(LINE)


def test_tzinfo_objects_are_accepted():
    rec = RecordParser(local_tz=dt.timezone(dt.timedelta(hours=1))).parse(LINE)

    assert rec.occurred_at.hour == 10


def test_depth_and_magnitude_are_single_precision(utc_parser):
    rec = utc_parser.parse(LINE.replace("8.50", "10.15").replace(" 4.8 ", " 4.65 "))

    assert rec.depth == to_float32(10.15)
    assert rec.depth != 10.15
    assert rec.magnitude == to_float32(4.65)
    assert rec.latitude == 38.1234
