import pytest

from arrayhtml import ValidationError, serialize_attrs


def test_serialize_empty_mapping() -> None:
    assert serialize_attrs({}) == ""


def test_serialize_mixed_value_types() -> None:
    attrs = {
        "class": "btn primary",
        "disabled": True,
        "id": "submit-btn",
        "onClick": 'alert("clicked")',
        "dataRole": None,
        "draggable": False,
        "height": 34,
        "opacity": 0.5,
    }
    assert serialize_attrs(attrs) == (
        ' class="btn primary" disabled id="submit-btn"'
        ' onClick="alert(&quot;clicked&quot;)" height="34" opacity="0.5"'
    )


def test_serialize_keeps_insertion_order() -> None:
    assert serialize_attrs({"b": "2", "a": "1"}) == ' b="2" a="1"'


def test_serialize_escapes_injection_in_values() -> None:
    assert serialize_attrs({"title": '"><script>'}) == ' title="&quot;&gt;&lt;script&gt;"'


def test_serialize_rejects_illegal_names() -> None:
    with pytest.raises(ValidationError, match="Illegal attribute name: illegal>attr"):
        serialize_attrs({"illegal>attr": "value"})


def test_serialize_skips_validation_for_dropped_values() -> None:
    assert serialize_attrs({"bad name": None, "also bad": False}) == ""


@pytest.mark.parametrize("value", ["test", ["a", "b"], None, 3])
def test_serialize_rejects_non_mappings(value) -> None:
    with pytest.raises(TypeError):
        serialize_attrs(value)


def test_serialize_small_and_large_floats() -> None:
    attrs = {"min": 0.00001, "step": 1e-7, "max": 1e21}
    assert serialize_attrs(attrs) == ' min="0.00001" step="1e-7" max="1e+21"'
