from __future__ import annotations

import pytest

from liteconfig.errors import InvalidKeyError, PathTraversalError
from liteconfig.nodes import ensure_destination, resolve_destination, split_key


def test_split_key_rejects_empty_segments():
    assert split_key("a.b.c") == ["a", "b", "c"]
    for bad in ["", ".a", "a.", "a..b"]:
        with pytest.raises(InvalidKeyError):
            split_key(bad)


def test_single_segment_key_resolves_to_root():
    doc = {"x": 1}
    node, field = resolve_destination(doc, "missing")
    assert node is doc
    assert field == "missing"


def test_resolve_destination_walks_nested_mappings():
    doc = {"server": {"http": {"port": 80}}}
    node, field = resolve_destination(doc, "server.http.port")
    assert node is doc["server"]["http"]
    assert field == "port"


def test_resolve_destination_does_not_inspect_field():
    doc = {"server": {}}
    node, field = resolve_destination(doc, "server.port")
    assert node == {}
    assert field == "port"


def test_resolve_destination_missing_segment():
    with pytest.raises(PathTraversalError) as exc:
        resolve_destination({"a": {}}, "a.b.c")
    assert exc.value.segment == "a.b"


def test_resolve_destination_non_mapping_segment():
    with pytest.raises(PathTraversalError) as exc:
        resolve_destination({"a": [1, 2]}, "a.b")
    assert exc.value.segment == "a"
    assert "list" in str(exc.value)


def test_ensure_destination_creates_intermediates():
    doc: dict = {}
    node, field = ensure_destination(doc, "a.b.c")
    node[field] = 1
    assert doc == {"a": {"b": {"c": 1}}}


def test_ensure_destination_refuses_to_overwrite_scalar():
    doc = {"a": 5}
    with pytest.raises(PathTraversalError):
        ensure_destination(doc, "a.b")
    assert doc == {"a": 5}
