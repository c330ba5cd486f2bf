import json

import pytest

from json_flattener import JsonFlattener

SIMPLE_DOCUMENT = [
    {
        "attribute1": 1,
        "arrayA": ["value1", "value2", "value3"],
        "arrayB": [{"id": 1}, {"id": 2}, {"id": 3}],
    },
    {
        "attribute1": 2,
        "arrayA": ["value1", "value2", "value3"],
        "arrayB": [{"id": 1}, {"id": 2}, {"id": 3}],
    },
]

NESTED_DOCUMENT = {
    "name": "store",
    "orders": [
        {"id": "A1", "items": [{"sku": "x", "qty": 2}, {"sku": "y", "qty": 1}]},
        {"id": "B2", "items": [{"sku": "z", "qty": 5}]},
    ],
}


@pytest.fixture
def simple_json():
    return json.dumps(SIMPLE_DOCUMENT)


@pytest.fixture
def nested_json():
    return json.dumps(NESTED_DOCUMENT, indent=2)


@pytest.fixture
def simple(simple_json):
    flattener = JsonFlattener(simple_json)
    flattener.parse()
    return flattener


@pytest.fixture
def nested(nested_json):
    flattener = JsonFlattener(nested_json)
    flattener.parse()
    return flattener


@pytest.fixture
def simple_file(tmp_path, simple_json):
    path = tmp_path / "simple.json"
    path.write_text(simple_json, encoding="utf-8")
    return path
