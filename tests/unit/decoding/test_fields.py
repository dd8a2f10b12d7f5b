"""Default-filling, string-coerced and world-name field decoders."""

import pytest
from pydantic import BaseModel, ValidationError

from wynn_api.decoding.fields import (
    DefaultBool,
    DefaultInt,
    DefaultList,
    DefaultMap,
    DefaultSet,
    DefaultStr,
    INT64_MAX,
    StringInt,
    World,
    fill_default,
    int64,
    parse_from_string,
    parse_world,
)

pytestmark = pytest.mark.unit


class Defaults(BaseModel):
    name: DefaultStr
    count: DefaultInt
    flag: DefaultBool
    tags: DefaultList[str]
    ids: DefaultSet[int]
    extra: DefaultMap[int]


class Coerced(BaseModel):
    x: StringInt
    server: World | None = None


class TestFillDefault:
    def test_null_becomes_factory_value(self):
        assert fill_default(None, list) == []
        assert fill_default(None, str) == ""

    def test_other_values_pass_through(self):
        assert fill_default(0, int) == 0
        assert fill_default("x", str) == "x"

    def test_absent_fields_use_defaults(self):
        model = Defaults.model_validate({})
        assert model.name == ""
        assert model.count == 0
        assert model.flag is False
        assert model.tags == []
        assert model.ids == set()
        assert model.extra == {}

    def test_null_fields_use_defaults(self):
        model = Defaults.model_validate(
            {"name": None, "count": None, "flag": None, "tags": None, "ids": None}
        )
        assert model == Defaults.model_validate({})

    def test_present_values_are_kept(self):
        model = Defaults.model_validate(
            {"name": "Salted", "count": 3, "tags": ["a"], "extra": {"k": 1}}
        )
        assert model.name == "Salted"
        assert model.count == 3
        assert model.tags == ["a"]
        assert model.extra == {"k": 1}

    def test_malformed_value_still_fails(self):
        with pytest.raises(ValidationError):
            Defaults.model_validate({"tags": 5})

    def test_defaults_serialize_as_is(self):
        model = Defaults.model_validate({})
        again = Defaults.model_validate(model.model_dump(mode="json"))
        assert again == model


class TestParseFromString:
    def test_parses_numeric_text(self):
        assert parse_from_string("42", int) == 42

    def test_unparseable_text_names_the_target(self):
        with pytest.raises(ValueError, match="as int"):
            parse_from_string("abc", int)

    def test_native_number_is_rejected(self):
        with pytest.raises(ValueError, match="expected a string"):
            parse_from_string(42, int)

    def test_string_int_field(self):
        assert Coerced.model_validate({"x": "-120"}).x == -120

    def test_string_int_field_rejects_number(self):
        with pytest.raises(ValidationError, match="expected a string"):
            Coerced.model_validate({"x": 7})

    def test_string_int_serializes_back_to_text(self):
        assert Coerced.model_validate({"x": "42"}).model_dump(mode="json")["x"] == "42"

    @pytest.mark.parametrize(
        "text",
        [" 42 ", "4_2", "\u0664\u0662", "", "+", "1e3", "0x10", str(INT64_MAX + 1)],
    )
    def test_string_int_rejects_non_decimal_text(self, text):
        with pytest.raises(ValidationError, match="as int64"):
            Coerced.model_validate({"x": text})

    def test_int64_bounds(self):
        assert int64(str(INT64_MAX)) == INT64_MAX
        assert int64("-9223372036854775808") == -(2**63)
        assert int64("+007") == 7
        with pytest.raises(ValueError, match="out of range"):
            int64("99999999999999999999999999")


class TestWorld:
    @pytest.mark.parametrize(("name", "number"), [("WC1", 1), ("WC42", 42)])
    def test_world_names(self, name, number):
        assert parse_world(name) == number

    @pytest.mark.parametrize(
        "name", ["EU1", "WC", "WCx", "wc1", "WC300", "WC 1", "WC1_0", "WC-1"]
    )
    def test_rejects_non_worlds(self, name):
        with pytest.raises(ValueError):
            parse_world(name)

    def test_world_round_trip(self):
        model = Coerced.model_validate({"x": "1", "server": "WC7"})
        assert model.server == 7
        assert model.model_dump(mode="json")["server"] == "WC7"
