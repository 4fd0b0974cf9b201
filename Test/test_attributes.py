# 12.10.26

import pytest

from CastReceiver.utils.exceptions import ParseSkip
from CastReceiver.core.m3u8.attributes import (
    AttributeValue,
    parse_attributes,
    serialize_attributes,
    parse_media_line,
    build_media_line,
)


LINE = '#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="aac",NAME="English, Stereo",LANGUAGE="en",DEFAULT=NO,URI="a.m3u8"'


def test_parse_keeps_order_and_quoting():
    attrs = parse_media_line(LINE)

    assert list(attrs) == ["TYPE", "GROUP-ID", "NAME", "LANGUAGE", "DEFAULT", "URI"]
    assert attrs["TYPE"] == AttributeValue("AUDIO", False)
    assert attrs["NAME"] == AttributeValue("English, Stereo", True)
    assert attrs["DEFAULT"] == AttributeValue("NO", False)


def test_serialize_reproduces_line():
    assert build_media_line(parse_media_line(LINE)) == LINE


def test_reparse_is_stable():
    body = 'TYPE=SUBTITLES,NAME="x",FORCED=YES,CHARACTERISTICS="a,b"'
    first = parse_attributes(body)
    assert parse_attributes(serialize_attributes(first)) == first


def test_malformed_tail_is_dropped():
    attrs = parse_attributes('TYPE=AUDIO,NAME="ok",this is junk,LANGUAGE="en"')

    assert list(attrs) == ["TYPE", "NAME"]


def test_unterminated_quote_falls_back_to_bare_value():
    attrs = parse_attributes('NAME="open,TYPE=AUDIO')

    assert attrs["NAME"] == AttributeValue('"open', False)
    assert attrs["TYPE"] == AttributeValue("AUDIO", False)


def test_duplicate_key_last_value_first_position():
    attrs = parse_attributes('LANGUAGE="en",TYPE=AUDIO,LANGUAGE="de"')

    assert list(attrs) == ["LANGUAGE", "TYPE"]
    assert attrs["LANGUAGE"].value == "de"


def test_keys_are_case_sensitive():
    attrs = parse_attributes('language="en",LANGUAGE="de"')

    assert attrs["language"].value == "en"
    assert attrs["LANGUAGE"].value == "de"


def test_empty_values():
    attrs = parse_attributes('NAME="",URI=')

    assert attrs["NAME"] == AttributeValue("", True)
    assert attrs["URI"] == AttributeValue("", False)
    assert serialize_attributes(attrs) == 'NAME="",URI='


def test_non_media_line_is_skipped():
    with pytest.raises(ParseSkip):
        parse_media_line('#EXT-X-STREAM-INF:BANDWIDTH=1')
