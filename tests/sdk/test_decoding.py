import json
from types import SimpleNamespace

import pytest

from okta_request._utils import decode_body, decode_error_body


class TestDecoding:
    def test_object_mode_handles_non_identifier_keys(self):
        value = decode_body('{"_links": {"self": {"href": "x"}}, "a-b": 1}')

        assert value._links.self.href == "x"
        assert getattr(value, "a-b") == 1

    def test_scalars(self):
        assert decode_body("true") is True
        assert decode_body('"text"', as_mapping=True) == "text"

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_body(self, text: str):
        assert decode_body(text) is None

    def test_invalid_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            decode_body("not json")

    def test_error_body_is_tolerant(self):
        assert decode_error_body("not json") is None
        assert decode_error_body("") is None
        assert decode_error_body('{"a": {"b": 1}}') == {"a": {"b": 1}}

    def test_mapping_mode_returns_dicts(self):
        value = decode_body('[{"id": "u1"}]', as_mapping=True)

        assert value == [{"id": "u1"}]
        assert not isinstance(value[0], SimpleNamespace)

    def test_error_body_too_deep_to_decode(self):
        assert decode_error_body("[" * 100000) is None
