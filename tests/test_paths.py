"""Tests for dotted path traversal helpers."""

from jason.paths import PATH_MISSING, get_path, has_paths, lookup, set_path


def test_get_path_walks_dict_path() -> None:
    """Resolver should follow dot-separated keys through nested dictionaries."""

    doc = {"config": {"dataset": {"name": "mnist", "size": 128}}}

    assert get_path(doc, "config.dataset.name") == "mnist"
    assert get_path(doc, "config.dataset.size") == 128


def test_get_path_walks_list_path() -> None:
    """Resolver should index lists with numeric segments."""

    doc = {"deps": [{"name": "a"}, {"name": "b"}]}

    assert get_path(doc, "deps.1.name") == "b"
    assert get_path(doc, "deps.0") == {"name": "a"}


def test_get_path_returns_missing_for_absent_segments() -> None:
    doc = {"config": {"seed": 42}}

    assert get_path(doc, "config.missing") is PATH_MISSING
    assert get_path(doc, "config.seed.unit") is PATH_MISSING
    assert get_path(doc, "nothing") is PATH_MISSING


def test_get_path_returns_missing_for_invalid_index() -> None:
    doc = {"values": [10, 20]}

    assert get_path(doc, "values.two") is PATH_MISSING
    assert get_path(doc, "values.10") is PATH_MISSING
    assert get_path(doc, "values.-1") is PATH_MISSING


def test_numeric_segment_is_a_key_inside_dicts() -> None:
    doc = {"years": {"2024": "leap", "0": "zero"}}

    assert get_path(doc, "years.2024") == "leap"
    assert get_path(doc, "years.0") == "zero"


def test_literal_dotted_key_wins_over_nested_path() -> None:
    doc = {"a.b": "literal", "a": {"b": "nested"}}

    assert get_path(doc, "a.b") == "literal"
    assert get_path({"a": {"b": "nested"}}, "a.b") == "nested"


def test_get_path_accepts_integer_keys() -> None:
    assert get_path(["x", "y"], 1) == "y"
    assert get_path({"7": "seven"}, 7) == "seven"
    assert get_path(["x"], 3) is PATH_MISSING


def test_get_path_keeps_null_values() -> None:
    doc = {"notes": None}

    assert get_path(doc, "notes") is None
    assert get_path(doc, "notes.text") is PATH_MISSING


def test_lookup_ignores_scalars() -> None:
    assert lookup("text", "0") is PATH_MISSING
    assert lookup(12, "0") is PATH_MISSING
    assert lookup(None, "a") is PATH_MISSING


def test_has_paths_requires_every_path() -> None:
    doc = {"order": {"id": "1", "items": []}}

    assert has_paths(doc, "order.id") is True
    assert has_paths(doc, ["order.id", "order.items"]) is True
    assert has_paths(doc, ("order.id", "order.notes")) is False
    assert has_paths(doc, {"order"}) is True


def test_has_paths_is_false_for_empty_inputs() -> None:
    assert has_paths({}, "anything") is False
    assert has_paths([], "0") is False
    assert has_paths({"a": 1}, []) is False


def test_set_path_creates_missing_dicts() -> None:
    doc: dict = {}

    root = set_path(doc, "order.customer.name", "Adeel")

    assert root is doc
    assert doc == {"order": {"customer": {"name": "Adeel"}}}


def test_set_path_replaces_scalar_intermediates() -> None:
    doc = {"order": "pending"}

    set_path(doc, "order.status", "shipped")

    assert doc == {"order": {"status": "shipped"}}


def test_set_path_overwrites_top_level_key() -> None:
    doc = {"status": {"code": 1}}

    set_path(doc, "status", "done")

    assert doc == {"status": "done"}


def test_set_path_never_writes_literal_dotted_keys() -> None:
    doc = {"a.b": "literal"}

    set_path(doc, "a.b", "nested")

    assert doc == {"a.b": "literal", "a": {"b": "nested"}}
    assert get_path(doc, "a.b") == "literal"


def test_set_path_indexes_into_lists() -> None:
    doc = {"items": [{"sku": "1"}, {"sku": "2"}]}

    set_path(doc, "items.1.sku", "20")
    set_path(doc, "items.2", {"sku": "3"})

    assert doc == {"items": [{"sku": "1"}, {"sku": "20"}, {"sku": "3"}]}


def test_set_path_turns_list_into_dict_for_non_index_segments() -> None:
    doc = {"items": ["a", "b"]}

    set_path(doc, "items.extra", "c")
    set_path(doc, "items.9", "z")

    assert doc == {"items": {"0": "a", "1": "b", "extra": "c", "9": "z"}}


def test_set_path_can_replace_list_root() -> None:
    doc = ["a"]

    assert set_path(doc, "0", "b") is doc
    assert doc == ["b"]

    root = set_path(doc, "name", "c")

    assert root == {"0": "b", "name": "c"}
    assert doc == ["b"]


def test_non_canonical_numbers_are_not_list_indices() -> None:
    doc = {"values": [10, 20]}

    assert get_path(doc, "values.01") is PATH_MISSING
    assert get_path(doc, "values.00") is PATH_MISSING
    assert get_path(doc, "values.0") == 10
    assert has_paths(doc, "values.01") is False
