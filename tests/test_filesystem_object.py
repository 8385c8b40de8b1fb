from datetime import datetime, timezone

import pytest

from davbrowse.filesystem_object import (
    FileSystemObject,
    FSObjectStruct,
    ObjectType,
    Status,
    extract_name,
    to_status,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/dav/", "dav"),
        ("/dav/Диск 1", "Диск 1"),
        ("/dav/Тестовый файл.txt", "Тестовый файл.txt"),
        ("/", "/"),
        ("", ""),
    ],
)
def test_extract_name(path, expected):
    assert extract_name(path) == expected


def test_extract_name_requires_slash():
    with pytest.raises(ValueError):
        extract_name("noslash")


@pytest.mark.parametrize(
    ("line", "status"),
    [
        ("HTTP/1.1 200 OK", Status.OK),
        ("HTTP/1.1 401 Unauthorized", Status.UNAUTHORIZED),
        ("HTTP/1.1 403 Forbidden", Status.FORBIDDEN),
        ("HTTP/1.1 404 Not Found", Status.NOT_FOUND),
        ("HTTP/1.1 500 Internal Server Error", Status.NONE),
    ],
)
def test_to_status(line, status):
    assert to_status(line) is status


def test_replace_unknown_status_only_touches_unknown():
    obj = FSObjectStruct()
    obj.type = (Status.UNKNOWN, ObjectType.DIRECTORY)
    obj.creation_date = (Status.OK, None)
    obj.content_length = (Status.UNKNOWN, 5)
    obj.replace_unknown_status(Status.FORBIDDEN)
    assert obj.type == (Status.FORBIDDEN, ObjectType.DIRECTORY)
    assert obj.creation_date[0] is Status.OK
    assert obj.last_modified[0] is Status.NONE
    assert obj.content_length == (Status.FORBIDDEN, 5)


def test_to_object_keeps_only_ok_properties():
    when = datetime(2025, 3, 18, 11, 15, 43, tzinfo=timezone.utc)
    obj = FSObjectStruct(
        name="file.txt",
        type=(Status.OK, ObjectType.FILE),
        creation_date=(Status.OK, when),
        last_modified=(Status.NOT_FOUND, when),
        content_length=(Status.OK, 1743607603214301),
    )
    result = obj.to_object()
    assert result == FileSystemObject("file.txt", ObjectType.FILE, when, None, 1743607603214301)
    assert result.is_creation_time_valid
    assert not result.is_modification_time_valid
    assert result.is_size_valid


def test_default_struct_gives_empty_file():
    result = FSObjectStruct().to_object()
    assert result.type is ObjectType.FILE
    assert not result.is_size_valid
    assert not result.is_creation_time_valid