import json

import pytest

from davbrowse.json_file import JsonFile, default_config_dir


def read(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_missing_file_is_created_with_null_root(tmp_path):
    jf = JsonFile("x.json", tmp_path)
    assert jf.root_obj is None
    assert jf.path == tmp_path / "x.json"
    assert read(tmp_path / "x.json") is None


def test_set_value_persists(tmp_path):
    jf = JsonFile("x.json", tmp_path)
    jf.set_value("key", [1, 2])
    again = JsonFile("x.json", tmp_path)
    assert again.root_obj == {"key": [1, 2]}


def test_existing_file_is_read_and_kept(tmp_path):
    target = tmp_path / "x.json"
    target.write_text(json.dumps({"a": "b"}), encoding="utf-8")
    jf = JsonFile("x.json", tmp_path)
    assert jf.root_obj == {"a": "b"}
    assert read(target) == {"a": "b"}


def test_invalid_json_resets_file(tmp_path):
    target = tmp_path / "x.json"
    target.write_text("{not json", encoding="utf-8")
    jf = JsonFile("x.json", tmp_path)
    assert jf.root_obj is None
    assert read(target) is None


def test_written_with_four_space_indent(tmp_path):
    jf = JsonFile("x.json", tmp_path)
    jf.set_value("k", "v")
    assert (tmp_path / "x.json").read_text(encoding="utf-8") == '{\n    "k": "v"\n}\n'


def test_keys_are_written_sorted(tmp_path):
    jf = JsonFile("x.json", tmp_path)
    jf.set_value("b", 1)
    jf.set_value("a", 2)
    assert list(read(tmp_path / "x.json")) == ["a", "b"]


def test_root_obj_is_a_copy(tmp_path):
    jf = JsonFile("x.json", tmp_path)
    jf.set_value("k", {"n": 1})
    obj = jf.root_obj
    obj["k"]["n"] = 5
    assert jf.root_obj == {"k": {"n": 1}}


def test_stored_value_is_a_copy(tmp_path):
    jf = JsonFile("x.json", tmp_path)
    items = [1]
    jf.set_value("k", items)
    items.append(2)
    assert jf.root_obj == {"k": [1]}


def test_unusable_directory_keeps_data_in_memory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    jf = JsonFile("x.json", blocker)
    assert jf.path is None
    jf.set_value("k", 1)
    assert jf.root_obj == {"k": 1}
    assert blocker.read_text(encoding="utf-8") == ""


def test_non_object_root_is_rejected(tmp_path):
    (tmp_path / "x.json").write_text("[1]", encoding="utf-8")
    jf = JsonFile("x.json", tmp_path)
    with pytest.raises(TypeError):
        jf.set_value("k", 1)
    assert jf.root_obj == [1]


def test_default_config_dir_name():
    assert default_config_dir().name == "WebDAVClient"