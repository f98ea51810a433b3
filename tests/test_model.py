import pytest

from inidoc import IniDocument, IniSection


def _sample() -> IniDocument:
    return IniDocument({"name": "value"}, {"server": {"port": "8080"}})


def test_constructors_fill_either_part() -> None:
    only_header = IniDocument({"a": "1"})
    only_sections = IniDocument(sections={"s": {"a": "1"}})

    assert dict(only_header.header) == {"a": "1"}
    assert len(only_header) == 0
    assert len(only_sections.header) == 0
    assert list(only_sections) == ["s"]


def test_document_copies_its_input() -> None:
    pairs = {"a": "1"}
    doc = IniDocument(pairs, {"s": pairs})
    pairs["a"] = "changed"

    assert doc.header["a"] == "1"
    assert doc["s"]["a"] == "1"


def test_find_value() -> None:
    doc = _sample()
    assert doc.find_value("name") == "value"
    assert doc.find_value("port", "server") == "8080"
    assert doc.find_value("port") is None
    assert doc.find_value("missing", "server", default="x") == "x"
    assert doc.find_value("port", "nowhere", default="x") == "x"


def test_missing_section_raises_key_error() -> None:
    with pytest.raises(KeyError):
        _sample()["nowhere"]


def test_equality_is_structural() -> None:
    assert _sample() == _sample()
    assert _sample() != IniDocument({"name": "value"})
    assert _sample() != IniDocument(
        {"name": "value"}, {"server": {"port": "8081"}}
    )
    # header pairs are not the same as a section of the same name.
    assert IniDocument({"a": "1"}) != IniDocument(sections={"": {"a": "1"}})


def test_equality_ignores_insertion_order() -> None:
    left = IniDocument({"a": "1", "b": "2"}, {"s": {}, "t": {}})
    right = IniDocument({"b": "2", "a": "1"}, {"t": {}, "s": {}})
    assert left == right


def test_document_is_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(_sample())


def test_document_is_read_only() -> None:
    doc = _sample()
    with pytest.raises(TypeError):
        doc["new"] = IniSection("new")  # type: ignore[index]
    with pytest.raises(TypeError):
        doc.header["name"] = "other"  # type: ignore[index]


def test_section_to_dict_is_a_copy() -> None:
    section = _sample()["server"]
    data = section.to_dict()
    data["port"] = "1"
    assert section["port"] == "8080"


def test_section_compares_with_plain_mappings() -> None:
    section = IniSection("s", {"k": "v"})
    assert section == {"k": "v"}
    assert section == IniSection("other", {"k": "v"})
    assert section != {"k": "w"}


def test_section_names() -> None:
    doc = _sample()
    assert doc.header.name is None
    assert doc["server"].name == "server"
    assert str(doc["server"]) == "[server]"
    assert repr(doc["server"]) == "[server] { .cnt = 1 }"


def test_dump_puts_header_first() -> None:
    dumped = _sample().dump()
    assert dumped == "name=value\n[server]\nport=8080\n"
    assert str(_sample()) == dumped


def test_dump_of_empty_document() -> None:
    assert IniDocument().dump() == ""
