import pytest

from vermada.cjson import (
    JsonNode,
    JsonParseError,
    JsonType,
    create_array,
    create_bool,
    create_null,
    create_number,
    create_number_array,
    create_object,
    create_string,
    create_string_array,
    parse,
    parse_with_opts,
)


def test_parsed_type_values_fixed_by_format():
    samples = ["false", "true", "null", "1", '"s"', "[]", "{}"]
    assert [parse(text).type.value for text in samples] == [0, 1, 2, 3, 4, 5, 6]
    assert parse("{}").type is JsonType(6)


def test_parse_literals():
    assert parse("null").type is JsonType.NULL
    assert parse("false").type is JsonType.FALSE
    true = parse("  true")
    assert true.type is JsonType.TRUE
    assert true.value_int == 1


@pytest.mark.parametrize("text", ["42", "-7", "3.25", "1.5e2", "-2.5E-3", "1e+3", "0"])
def test_parse_numbers_match_float(text):
    node = parse(text)
    assert node.type is JsonType.NUMBER
    assert node.value_double == pytest.approx(float(text))
    assert node.value_int == int(float(text))


def test_parse_lenient_numbers():
    assert parse("0123").value_double == 123.0
    assert parse("-").value_double == 0.0
    node, end = parse_with_opts("5.x", False)
    assert node.value_double == 5.0
    assert end == 1


def test_parse_object_and_case_insensitive_lookup():
    root = parse('{"soundVolume": 80, "Name": "stage", "list": [1, 2, 3]}')
    assert root.type is JsonType.OBJECT
    assert len(root) == 3
    assert root.get_item("SOUNDVOLUME").value_int == 80
    assert root.get_item("name").value_string == "stage"
    assert [child.value_int for child in root["list"]] == [1, 2, 3]
    assert root.get_item("missing") is None
    with pytest.raises(KeyError):
        root["missing"]


def test_member_order_and_names_are_kept():
    root = parse('{"b": 1, "a": 2, "c": {}}')
    assert [child.name for child in root] == ["b", "a", "c"]
    assert root["c"].type is JsonType.OBJECT
    assert len(root["c"]) == 0


def test_string_escapes():
    node = parse(r'"a\"b\\c\/d\n\t\u00e9"')
    assert node.value_string == 'a"b\\c/d\n\t\u00e9'


def test_surrogate_pair_decodes_to_single_character():
    assert parse(r'"\ud83d\ude00"').value_string == chr(0x1F600)


def test_invalid_unicode_escapes_are_dropped():
    assert parse(r'"x\u0000y"').value_string == "xy"
    assert parse(r'"x\udc00y"').value_string == "xy"
    assert parse(r'"x\ud83dy"').value_string == "xy"


def test_unterminated_string_is_accepted():
    assert parse('"open').value_string == "open"


@pytest.mark.parametrize("text", ["[1,2", "{\"a\" 1}", "{1: 2}", "", "@", "[1,]"])
def test_parse_errors(text):
    with pytest.raises(JsonParseError):
        parse(text)


def test_error_position_points_at_failure():
    text = "[1,2"
    with pytest.raises(JsonParseError) as info:
        parse(text)
    assert info.value.position == len(text)
    assert isinstance(info.value, ValueError)


def test_trailing_text_allowed_unless_required():
    node, end = parse_with_opts("{} x", False)
    assert node.type is JsonType.OBJECT
    assert end == 2
    with pytest.raises(JsonParseError) as info:
        parse_with_opts("{} x", True)
    assert info.value.position == 3
    node, end = parse_with_opts("[]   ", True)
    assert end == 5


def test_text_after_nul_is_ignored():
    node, _ = parse_with_opts("[1]\0garbage", True)
    assert [c.value_int for c in node] == [1]


def test_create_functions():
    assert create_null().type is JsonType.NULL
    assert create_bool(True).type is JsonType.TRUE
    assert create_bool(0).type is JsonType.FALSE
    number = create_number(-3.75)
    assert number.value_double == -3.75
    assert number.value_int == -3
    assert create_string("hi").value_string == "hi"
    assert len(create_array()) == 0
    assert create_object().type is JsonType.OBJECT


def test_create_arrays():
    numbers = create_number_array([1, 2.5])
    assert numbers.type is JsonType.ARRAY
    assert [n.value_double for n in numbers] == [1.0, 2.5]
    strings = create_string_array(["a", "b"])
    assert [s.value_string for s in strings] == ["a", "b"]


def test_set_append_and_get():
    root = create_object()
    root.set("x", create_number(4))
    root.set("x", create_number(5))
    root.append(None)
    assert len(root) == 2
    assert root.get_item("x").value_int == 4
    assert root[1].name == "x"


def test_detach_and_detach_by_name():
    root = parse('{"a": 1, "b": 2, "c": 3}')
    detached = root.detach_by_name("B")
    assert detached.value_int == 2
    assert [c.name for c in root] == ["a", "c"]
    assert root.detach(5) is None
    assert root.detach_by_name("zzz") is None
    first = root.detach(0)
    assert first.name == "a"
    assert [c.name for c in root] == ["c"]


def test_insert_and_replace():
    array = create_number_array([1, 3])
    array.insert(1, create_number(2))
    array.insert(99, create_number(4))
    assert [n.value_int for n in array] == [1, 2, 3, 4]
    array.replace(0, create_string("first"))
    array.replace(10, create_string("ignored"))
    assert array[0].value_string == "first"
    assert len(array) == 4


def test_replace_by_name_keeps_name():
    root = parse('{"Speed": 2}')
    root.replace_by_name("speed", create_number(9))
    assert root["speed"].value_int == 9
    assert root[0].name == "speed"
    root.replace_by_name("absent", create_number(1))
    assert len(root) == 1


def test_duplicate():
    root = parse('{"a": [1, {"b": "c"}], "d": null}')
    copy = root.duplicate(True)
    assert copy == root
    copy["a"][1]["b"].value_string = "changed"
    assert root["a"][1]["b"].value_string == "c"
    shallow = root.duplicate(False)
    assert shallow.type is JsonType.OBJECT
    assert len(shallow) == 0


def test_empty_container_is_truthy():
    node = JsonNode(JsonType.ARRAY)
    assert bool(node) is True
    assert list(node) == []
    with pytest.raises(IndexError):
        node[0]