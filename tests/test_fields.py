import json

import pytest

from apibook.generator.fields import describe, humanize, infer_type


class TestInferType:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("null", "null"),
            ('"hi"', "string"),
            ("30", "integer"),
            ("-7", "integer"),
            ("9.5", "number"),
            ("1e3", "number"),
            ("true", "boolean"),
            ("false", "boolean"),
            ("[1, 2]", "array"),
            ('{"a": 1}', "object"),
        ],
    )
    def test_decoded_json_values(self, text, expected):
        assert infer_type(json.loads(text)) == expected

    def test_bool_is_not_integer(self):
        assert infer_type(True) == "boolean"

    def test_unrecognized_value_is_unknown(self):
        assert infer_type(object()) == "unknown"
        assert infer_type((1, 2)) == "unknown"

    def test_same_value_same_tag(self):
        value = {"nested": [1, 2]}
        assert infer_type(value) == infer_type(value)


class TestHumanize:
    def test_snake_case(self):
        assert humanize("user_id") == "User id"

    def test_camel_case(self):
        assert humanize("userId") == "User id"

    def test_empty(self):
        assert humanize("") == ""

    def test_acronym_kept(self):
        assert humanize("ID") == "ID"

    def test_acronym_inside_name(self):
        assert humanize("userID") == "User ID"
        assert humanize("HTTPStatus") == "HTTP status"

    def test_acronym_plural(self):
        assert humanize("userIDs") == "User IDs"
        assert humanize("IDsList") == "IDs list"

    def test_single_word(self):
        assert humanize("email") == "Email"

    def test_multiple_words(self):
        assert humanize("created_at_date") == "Created at date"
        assert humanize("firstName") == "First name"


class TestDescribe:
    def test_string_with_example(self):
        assert describe("email", "string", "a@b.com") == "Email (example: a@b.com)"

    def test_empty_string(self):
        assert describe("email", "string", "") == "Email"

    def test_boolean(self):
        assert describe("is_active", "boolean") == "Is active flag"

    def test_numbers(self):
        assert describe("age", "integer", 30) == "Age value"
        assert describe("score", "number", 9.5) == "Score value"

    def test_array(self):
        assert describe("roles", "array", ["admin"]) == "List of Roles"

    def test_object(self):
        assert describe("address", "object", {}) == "Address object details"

    def test_null_and_unknown(self):
        assert describe("nickname", "null") == "Nickname"
        assert describe("blob", "unknown") == "Blob"
