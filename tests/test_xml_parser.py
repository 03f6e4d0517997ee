import pytest

from core.atlas import Region
from core.errors import MalformedDescriptorError, MissingAttributeError, ParseError, UnexpectedRootError
from core.xml_parser import parse_xml

ATLAS = (
    '<TextureAtlas>'
    '<SubTexture name="a" x="0" y="0" width="10" height="10"/>'
    '<SubTexture name="b" x="10" y="0" width="5" height="5"/>'
    '</TextureAtlas>'
)


def test_parses_regions_in_document_order():
    d = parse_xml(ATLAS)
    assert list(d) == [Region("a", 0, 0, 10, 10), Region("b", 10, 0, 5, 5)]
    assert d.wanted_width == 15
    assert d.wanted_height == 10
    assert d.diagnostics == ()


def test_ignores_other_children_and_attributes():
    text = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<TextureAtlas imagePath="atlas.png">\n'
        '  <!-- generated -->\n'
        '  <Meta version="2"/>\n'
        '  <SubTexture name="hero" x="+3" y="4" width="8" height="9" frameX="-1" rotated="false"/>\n'
        '</TextureAtlas>\n'
    )
    d = parse_xml(text)
    assert list(d) == [Region("hero", 3, 4, 8, 9)]


def test_only_immediate_children_count():
    text = '<TextureAtlas><Group><SubTexture name="x" x="0" y="0" width="1" height="1"/></Group></TextureAtlas>'
    assert len(parse_xml(text)) == 0


def test_wrong_root():
    with pytest.raises(UnexpectedRootError) as info:
        parse_xml('<Atlas><SubTexture name="a" x="0" y="0" width="1" height="1"/></Atlas>')
    assert info.value.root_name == "Atlas"


def test_malformed_markup():
    with pytest.raises(MalformedDescriptorError):
        parse_xml('<TextureAtlas><SubTexture name="a"></TextureAtlas>')


def test_non_integer_aborts_whole_parse():
    text = ATLAS.replace('width="5"', 'width="abc"')
    with pytest.raises(MalformedDescriptorError):
        parse_xml(text)


def test_missing_attributes_use_defaults_and_report(caplog):
    text = '<TextureAtlas><SubTexture x="1" y="2" height="4"/><SubTexture name="ok" x="0" y="0" width="1" height="1"/></TextureAtlas>'
    with caplog.at_level("WARNING"):
        d = parse_xml(text)
    assert list(d) == [Region("ERROR", 1, 2, 0, 4), Region("ok", 0, 0, 1, 1)]
    assert [(m.region_index, m.attribute, m.default) for m in d.diagnostics] == [(0, "width", 0), (0, "name", "ERROR")]
    assert "width" in caplog.text


def test_strict_mode_rejects_missing_attribute():
    with pytest.raises(MissingAttributeError) as info:
        parse_xml('<TextureAtlas><SubTexture name="a" x="0" y="0" width="1"/></TextureAtlas>', strict=True)
    assert info.value.attribute == "height"
    assert isinstance(info.value, ParseError)


def test_duplicate_names_are_kept():
    text = '<TextureAtlas><SubTexture name="a" x="0" y="0" width="1" height="1"/><SubTexture name="a" x="1" y="0" width="1" height="1"/></TextureAtlas>'
    d = parse_xml(text)
    assert len(d) == 2
    assert d.duplicate_names() == ["a"]


def test_default_namespace_is_accepted():
    text = ('<TextureAtlas xmlns="http://example.com/atlas">'
            '<SubTexture name="a" x="1" y="2" width="3" height="4"/>'
            '</TextureAtlas>')
    assert list(parse_xml(text)) == [Region("a", 1, 2, 3, 4)]


def test_namespaced_wrong_root_is_rejected():
    with pytest.raises(UnexpectedRootError):
        parse_xml('<Atlas xmlns="http://example.com/atlas"/>')


def test_accepts_encoded_bytes():
    text = '<?xml version="1.0" encoding="UTF-16"?><TextureAtlas><SubTexture name="é" x="0" y="0" width="2" height="2"/></TextureAtlas>'
    assert list(parse_xml(text.encode("utf-16"))) == [Region("é", 0, 0, 2, 2)]
