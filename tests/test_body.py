"""Tests for request body assembly."""

import pytest

from webfox.args import ContentFormat
from webfox.body import build_body, build_form, build_json, parse_json_fragment
from webfox.errors import BuildError, FormFieldError, JsonFragmentError
from webfox.grammar import RequestItem, RequestItemKind

STRING = RequestItemKind.STRING_FIELD
JSON = RequestItemKind.JSON_FIELD


def _item(kind, key, value):
    return RequestItem(kind, key, value)


# ── JSON bodies ──────────────────────────────────────────────────────────


class TestBuildJson:
    def test_raw_json_array(self):
        body = build_json([_item(JSON, "values", "[1,2,3]")])
        assert body == {"values": [1, 2, 3]}

    def test_string_field_stays_string(self):
        assert build_json([_item(STRING, "count", "5")]) == {"count": "5"}

    def test_json_scalars_and_objects(self):
        body = build_json(
            [
                _item(JSON, "n", "5"),
                _item(JSON, "ok", "true"),
                _item(JSON, "nothing", "null"),
                _item(JSON, "obj", '{"a": {"b": [1]}}'),
            ],
        )
        assert body == {"n": 5, "ok": True, "nothing": None, "obj": {"a": {"b": [1]}}}

    def test_last_write_wins(self):
        body = build_json([_item(STRING, "a", "1"), _item(STRING, "a", "2")])
        assert body == {"a": "2"}

    def test_last_write_wins_across_kinds(self):
        body = build_json([_item(JSON, "a", "[1]"), _item(STRING, "a", "x")])
        assert body == {"a": "x"}

    def test_malformed_fragment_names_key(self):
        with pytest.raises(JsonFragmentError) as exc:
            build_json([_item(STRING, "ok", "1"), _item(JSON, "values", "[1,2")])
        assert exc.value.key == "values"
        assert "values" in str(exc.value)
        assert exc.value.message

    def test_empty_fragment_rejected(self):
        with pytest.raises(JsonFragmentError):
            build_json([_item(JSON, "v", "")])

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", "[NaN]"])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(JsonFragmentError):
            parse_json_fragment("v", text)

    @pytest.mark.parametrize("text", ["1e400", "-1e400", "[1, 2e999]"])
    def test_out_of_range_number_rejected(self, text):
        with pytest.raises(JsonFragmentError) as exc:
            parse_json_fragment("n", text)
        assert exc.value.key == "n"
        assert "out of range" in exc.value.message

    def test_large_finite_numbers_kept(self):
        assert parse_json_fragment("n", "[1e300, 123456789012345678901234567890]") == [
            1e300,
            123456789012345678901234567890,
        ]

    def test_deep_nesting_names_key(self):
        with pytest.raises(JsonFragmentError) as exc:
            build_json([_item(JSON, "v", "[" * 100000)])
        assert exc.value.key == "v"
        assert "nesting too deep" in str(exc.value)

    def test_fragment_error_is_build_error(self):
        with pytest.raises(BuildError):
            build_json([_item(JSON, "v", "{")])

    def test_non_data_item_rejected(self):
        with pytest.raises(ValueError):
            build_json([_item(RequestItemKind.HEADER, "X-A", "1")])


# ── Form bodies ──────────────────────────────────────────────────────────


class TestBuildForm:
    def test_string_fields(self):
        form = build_form([_item(STRING, "name", "john"), _item(STRING, "city", "lund")])
        assert form == {"name": "john", "city": "lund"}

    def test_json_field_stringified_by_default(self):
        assert build_form([_item(JSON, "values", "[1,2,3]")]) == {"values": "[1,2,3]"}

    def test_malformed_json_passes_through_when_lenient(self):
        assert build_form([_item(JSON, "values", "[1,2")]) == {"values": "[1,2"}

    def test_json_field_rejected_when_strict(self):
        with pytest.raises(FormFieldError) as exc:
            build_form([_item(STRING, "a", "1"), _item(JSON, "values", "[1]")], strict=True)
        assert exc.value.key == "values"

    def test_strict_accepts_string_fields(self):
        assert build_form([_item(STRING, "a", "1")], strict=True) == {"a": "1"}

    def test_last_write_wins(self):
        assert build_form([_item(STRING, "a", "1"), _item(STRING, "a", "2")]) == {"a": "2"}


# ── build_body dispatch ──────────────────────────────────────────────────


class TestBuildBody:
    def test_json_default(self):
        body = build_body([_item(JSON, "values", "[1,2,3]")], ContentFormat.JSON)
        assert body == {"values": [1, 2, 3]}

    def test_form(self):
        body = build_body([_item(JSON, "values", "[1,2,3]")], ContentFormat.FORM)
        assert body == {"values": "[1,2,3]"}

    def test_form_strict(self):
        with pytest.raises(FormFieldError):
            build_body([_item(JSON, "v", "1")], ContentFormat.FORM, strict_form=True)

    def test_multipart_not_assembled(self):
        assert build_body([_item(STRING, "a", "1")], ContentFormat.MULTIPART) is None

    def test_empty_json(self):
        assert build_body([], ContentFormat.JSON) == {}
