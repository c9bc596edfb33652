import pytest

from checksim.art import Check, build_token_uri, generate_svg, map_check_attributes, parse_token_uri
from checksim.errors import MalformedInputRecord


def test_token_uri_roundtrip():
    check = Check.root(77)
    uri = build_token_uri(check, {}, "Checks 77")
    assert uri.startswith("data:application/json;base64,")
    parsed = parse_token_uri(uri)
    assert parsed.name == "Checks 77"
    assert parsed.svg == generate_svg(check, {})
    assert parsed.attributes == map_check_attributes(check)


@pytest.mark.parametrize("uri", ["data:application/json;base64,@@@", "data:application/json;base64,e30="])
def test_parse_rejects_bad_documents(uri):
    with pytest.raises(MalformedInputRecord):
        parse_token_uri(uri)
