import pytest

from arrayhtml import ValidationError, render_to_json


def Card(props):
    return ["div", {"class": "card"}, ["h2", props["title"]], *props["children"]]


def test_tag_nodes_keep_props_and_children() -> None:
    element = ["div", {"class": "c"}, "Hi", ["span", "W"]]
    assert render_to_json(element) == ["div", {"class": "c"}, "Hi", ["span", "W"]]


def test_props_are_not_escaped() -> None:
    element = ["a", {"title": '<"x">'}, "<b>"]
    assert render_to_json(element) == ["a", {"title": '<"x">'}, "<b>"]


@pytest.mark.parametrize("value", [None, False, True, 3, "text"])
def test_non_nodes_pass_through(value) -> None:
    assert render_to_json(value) == value


def test_components_are_resolved() -> None:
    element = ["main", [Card, {"title": "T"}, ["p", "body"]]]
    assert render_to_json(element) == [
        "main",
        ["div", {"class": "card"}, ["h2", "T"], ["p", "body"]],
    ]


def test_component_children_conflict() -> None:
    with pytest.raises(ValidationError, match="but not both"):
        render_to_json([Card, {"title": "T", "children": []}, "x"])


def test_fragments_pass_through_unchanged() -> None:
    fragment = ["", ["p", "a"], [Card, {"title": "x"}]]
    assert render_to_json(fragment) is fragment


def test_html_rules_are_not_applied() -> None:
    assert render_to_json(["img", {"rawHtml": "<b>"}, "child"]) == ["img", {"rawHtml": "<b>"}, "child"]


@pytest.mark.parametrize("raw_html", [5, ["b"], True])
def test_non_string_raw_html_passes_through(raw_html) -> None:
    element = ["div", {"rawHtml": raw_html}]
    assert render_to_json(element) == ["div", {"rawHtml": raw_html}]


def test_invalid_tag_names_pass_through() -> None:
    assert render_to_json(["not a tag", "x"]) == ["not a tag", "x"]


def test_invalid_first_entry() -> None:
    with pytest.raises(ValidationError):
        render_to_json([42])


def test_depth_limit() -> None:
    node = ["div"]
    node.append(node)
    with pytest.raises(ValidationError, match="Maximum element depth exceeded"):
        render_to_json(node)


def test_depth_beyond_interpreter_stack() -> None:
    element = "leaf"
    for _ in range(2000):
        element = ["div", element]
    with pytest.raises(ValidationError, match="Maximum element depth exceeded"):
        render_to_json(element, max_depth=10_000)
