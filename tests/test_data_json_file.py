import json

import pytest

from davbrowse.data_json_file import DataJsonFile
from davbrowse.server_info import ServerInfo


def make_info(n=1):
    return ServerInfo(f"desc {n}", f"host{n}.example.com", 8000 + n, f"/dav{n}/")


def read(tmp_path):
    return json.loads((tmp_path / "data.json").read_text(encoding="utf-8"))


def write(tmp_path, data):
    (tmp_path / "data.json").write_text(json.dumps(data), encoding="utf-8")


def test_fresh_file_gets_empty_server_list(tmp_path):
    data = DataJsonFile(tmp_path)
    assert data.read_servers() == []
    assert read(tmp_path) == {"servers": []}


def test_added_server_is_read_back(tmp_path):
    data = DataJsonFile(tmp_path)
    data.read_servers()
    info = make_info()
    data.add(info)
    assert DataJsonFile(tmp_path).read_servers() == [info]


def test_entry_uses_documented_keys(tmp_path):
    data = DataJsonFile(tmp_path)
    data.read_servers()
    info = make_info()
    data.add(info)
    assert read(tmp_path)["servers"] == [
        {"description": info.description, "address": info.addr, "port": info.port, "path": info.path}
    ]


def test_edit_replaces_entry(tmp_path):
    data = DataJsonFile(tmp_path)
    data.read_servers()
    data.add(make_info(1))
    data.add(make_info(2))
    data.edit(1, make_info(3))
    assert DataJsonFile(tmp_path).read_servers() == [make_info(1), make_info(3)]


def test_remove_deletes_range(tmp_path):
    data = DataJsonFile(tmp_path)
    data.read_servers()
    for n in (1, 2, 3):
        data.add(make_info(n))
    data.remove(1, 1)
    assert DataJsonFile(tmp_path).read_servers() == [make_info(1), make_info(3)]


def test_invalid_entries_are_dropped_and_file_repaired(tmp_path):
    info = make_info()
    valid = {"description": info.description, "address": info.addr, "port": info.port, "path": info.path}
    bad_port = dict(valid, port=70000)
    write(tmp_path, {"servers": [valid, {"description": "x"}, bad_port, "junk"]})
    data = DataJsonFile(tmp_path)
    assert data.read_servers() == [info]
    assert read(tmp_path)["servers"] == [valid]


def test_non_list_servers_is_reset(tmp_path):
    write(tmp_path, {"servers": 5})
    data = DataJsonFile(tmp_path)
    assert data.read_servers() == []
    assert read(tmp_path) == {"servers": []}


def test_add_without_server_list_raises(tmp_path):
    data = DataJsonFile(tmp_path)
    with pytest.raises(ValueError):
        data.add(make_info())


def test_edit_out_of_range_raises(tmp_path):
    data = DataJsonFile(tmp_path)
    data.read_servers()
    with pytest.raises(IndexError):
        data.edit(0, make_info())


def test_remove_out_of_range_raises(tmp_path):
    data = DataJsonFile(tmp_path)
    data.read_servers()
    data.add(make_info())
    with pytest.raises(IndexError):
        data.remove(0, 2)
    assert data.read_servers() == [make_info()]


def test_other_keys_are_preserved(tmp_path):
    write(tmp_path, {"other": 1, "servers": []})
    data = DataJsonFile(tmp_path)
    data.read_servers()
    data.add(make_info())
    assert read(tmp_path)["other"] == 1