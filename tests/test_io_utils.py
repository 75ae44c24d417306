import json
from pathlib import Path

import pytest

from arrayhtml.io_utils import (
    import_object,
    load_element_source,
    read_element,
    stable_json_dumps,
    write_text,
)


def test_stable_json_dumps_keeps_key_order() -> None:
    text = stable_json_dumps(["div", {"z": "1", "a": "é"}], indent=None)
    assert text == '["div", {"z": "1", "a": "é"}]\n'


def test_read_element_json_and_yaml(tmp_path: Path) -> None:
    json_path = tmp_path / "page.json"
    json_path.write_text(json.dumps(["p", {"class": "x"}, "hi"]), encoding="utf-8")
    yaml_path = tmp_path / "page.yml"
    yaml_path.write_text("- p\n- class: x\n- hi\n", encoding="utf-8")

    assert read_element(json_path) == ["p", {"class": "x"}, "hi"]
    assert read_element(yaml_path) == ["p", {"class": "x"}, "hi"]


def test_read_element_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "page.txt"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        read_element(path)


def test_import_object() -> None:
    assert import_object("json:dumps") is json.dumps
    assert import_object("os.path:join.__name__") == "join"
    with pytest.raises(ValueError):
        import_object("json")


def test_load_element_source_wraps_callables() -> None:
    element = load_element_source("json:dumps")
    assert element == [json.dumps]


def test_load_element_source_missing() -> None:
    with pytest.raises(FileNotFoundError):
        load_element_source("does-not-exist.json")


def test_write_text_creates_parents(tmp_path: Path) -> None:
    target = write_text(tmp_path / "a" / "b" / "out.html", "<p></p>")
    assert target.read_text(encoding="utf-8") == "<p></p>"
