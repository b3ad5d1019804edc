import json
import re
from unittest.mock import patch

import pytest
from httpx import URL

from anyconn._utils._encoders import (
    decode_json,
    encode_form,
    encode_formdata,
    encode_json,
    format_headers,
    fraction_to_base36,
    make_boundary,
    set_query_params,
    stringify,
    to_base36,
)


class TestStringify:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("x", "x"),
            (1, "1"),
            (1.0, "1"),
            (1.5, "1.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (float("nan"), "NaN"),
            (float("-inf"), "-Infinity"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.5e21, "1.5e+21"),
            (-1e21, "-1e+21"),
            (1e-7, "1e-7"),
            (1e-6, "0.000001"),
            (0.00001, "0.00001"),
            (-0.0, "0"),
        ],
    )
    def test_stringify(self, value, expected):
        assert stringify(value) == expected


class TestFormatHeaders:
    def test_defaults_and_identity(self):
        headers = format_headers(None)

        assert dict(headers) == {
            "accept": "*/*",
            "connection": "keep-alive",
            "user-agent": "AnyConn/0.0.1",
        }

    def test_null_values_are_dropped(self):
        headers = format_headers({"x-keep": "1", "x-drop": None})

        assert headers["x-keep"] == "1"
        assert "x-drop" not in headers

    def test_user_agent_cannot_be_overridden(self):
        headers = format_headers({"User-Agent": "curl/8.0", "user-agent": "mine"})

        assert headers.get_list("user-agent") == ["AnyConn/0.0.1"]

    def test_caller_overrides_defaults_and_scalars_are_stringified(self):
        headers = format_headers({"Accept": "application/json", "x-n": 2, "x-b": True})

        assert headers.get_list("accept") == ["application/json"]
        assert headers["x-n"] == "2"
        assert headers["x-b"] == "true"


class TestQueryParams:
    def test_fields_become_query_params(self):
        url = set_query_params(URL("http://h/p"), {"a": 1, "b": "x"})

        assert str(url) == "http://h/p?a=1&b=x"

    def test_existing_param_is_overwritten_and_nulls_skipped(self):
        url = set_query_params(URL("http://h/p?a=old&c=3"), {"a": "new", "z": None})

        assert url.params.get_list("a") == ["new"]
        assert url.params["c"] == "3"
        assert "z" not in url.params


class TestBodies:
    def test_json_is_compact(self):
        assert encode_json({"a": 1}) == b'{"a":1}'

    def test_json_keeps_non_ascii(self):
        assert encode_json({"name": "héllo"}) == '{"name":"héllo"}'.encode("utf-8")

    def test_json_non_finite_floats_become_null(self):
        body = encode_json(
            {"a": float("nan"), "b": [float("inf"), 1.5], "c": {"d": float("-inf")}}
        )

        assert body == b'{"a":null,"b":[null,1.5],"c":{"d":null}}'

    @pytest.mark.parametrize("text", ["NaN", '{"a":Infinity}', "[-Infinity]"])
    def test_decode_rejects_non_standard_constants(self, text):
        with pytest.raises(json.JSONDecodeError):
            decode_json(text)

    def test_form_percent_encodes_keys_and_values(self):
        assert encode_form({"a b": "c&d"}) == b"a%20b=c%26d"

    def test_form_keeps_uri_component_safe_characters(self):
        assert encode_form({"k": "a-_.!~*'()z", "n": None}) == b"k=a-_.!~*'()z&n=null"

    def test_formdata_parts(self):
        body = encode_formdata({"k": "v", "n": 2}, "B")

        assert body == (
            b"--B\n"
            b'Content-Disposition: form-data; name="k"\n\n'
            b"v\n"
            b"--B\n"
            b'Content-Disposition: form-data; name="n"\n\n'
            b"2\n"
            b"--B--"
        )


class TestBoundary:
    def test_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(1000) == "rs"

    def test_fraction_base36(self):
        assert fraction_to_base36(0.5) == "i"
        assert fraction_to_base36(0.0) == "0"

    def test_boundary_layout(self):
        with (
            patch("anyconn._utils._encoders.time.time", return_value=1.0),
            patch("anyconn._utils._encoders.random.random", return_value=0.5),
        ):
            assert make_boundary() == "AnyConnrsii"

    def test_boundary_is_random(self):
        first, second = make_boundary(), make_boundary()

        assert re.fullmatch(r"AnyConn[0-9a-z]+", first)
        assert first != second
