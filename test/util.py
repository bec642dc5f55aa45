"""
Helpers shared by tests.
"""

import copy
import json
import os


def assert_equal(actual, expected, explanation=None):
    """Assert that the two values are equal. Optionally provide explanation."""
    assert (
        actual == expected
    ), f"\nActual: {actual}\nExpected: {expected}\nAdditional_info: {explanation}"


def assert_hex_equal(actual, expected):
    """
    Assert that two hex strings are equal when converted to ints.
    Converting back to hex to have hex strings in error message in case of failed assertion.
    """
    assert hex(int(actual, 16)) == hex(int(expected, 16))


def load_json_from_path(path):
    """Loads a json file from `path`."""
    with open(path, encoding="utf-8") as expected_file:
        return json.load(expected_file)


def load_file_content(path: str):
    """Load content of file located at `path`."""
    with open(path, encoding="utf-8") as content_file:
        return content_file.read()


def with_nested(json_value: dict, path, key, value):
    """
    Returns a deep copy of `json_value` with `key: value` appended to the object at `path`.
    """
    result = copy.deepcopy(json_value)
    target = result
    for step in path:
        target = target[step]
    target[key] = value
    return result


def artifact_path(relative_path: str) -> str:
    """Absolute path of a test artifact"""
    return os.path.join(os.path.dirname(os.path.dirname(__file__)), relative_path)
