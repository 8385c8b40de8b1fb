# davbrowse

Building blocks for a WebDAV file browser. The package has no user
interface of its own. It provides the data layer and list models that a
front end sits on:

- **Server bookmarks.** `davbrowse.server_info.ServerInfo` holds a
  description, an address, a port (0–65535, checked on assignment) and a
  path. `davbrowse.server_info_manager.ServerInfoManager` keeps the list and
  writes every change through `davbrowse.data_json_file.DataJsonFile` to
  `data.json`. When `data.json` holds invalid entries, `DataJsonFile`
  drops them and stores the repaired list.
- **JSON files.** `davbrowse.json_file.JsonFile` keeps a JSON document in sync
  with a file. By default the file lives in `default_config_dir()`, which is
  the `WebDAVClient` folder in the user's configuration directory. You can
  pass another directory.
- **Requests.** `davbrowse.client.Client` sends a `PROPFIND` request with
  `Depth: 1` over plain HTTP on a background thread. Your reply handler gets
  the raw reply bytes. Your error handler gets a
  `davbrowse.network_errors.NetworkError`. `abort()` cancels the request in
  flight and reports `NetworkError.OPERATION_CANCELED`. `wait()` joins the
  latest request thread.
- **Error text.** `describe_network_error(error)` returns a pair: the message
  to show the user and the name to log. `error_message(kind, error)` returns
  the text to show for an `ErrorKind`, and logs network errors.
- **Entries.** `davbrowse.filesystem_object.FileSystemObject` holds the name,
  the `ObjectType`, the creation and modification times and the size of an
  entry. A property the server did not provide is `None`.
  `FSObjectStruct` collects per-property `Status` values and builds a
  `FileSystemObject` with `to_object()`. `extract_name` and `to_status` are
  the helpers behind it.
- **List models.** Each model has `row_count()`, `data(row, role)` and
  `role_names()`:
  - `ServerItemModel` is editable: `set_data`, `remove_rows`, `add_server_info`.
  - `FileItemModel` lists directory entries. Outside the root it adds a `..`
    row at the top. It returns icon names by file extension; see
    `icon_name_for_file`.
  - `LogItemModel` shows the application log. Messages that arrive are
    buffered until `update()`.
  - `SortParamItemModel` edits the sort order: `move_up`, `move_down`,
    `invert`, `save`, `reset_changes`, `has_changes`.
- **Sorting and search.** `davbrowse.file_sort_filter_model.FileSortFilterModel`
  orders the rows of a `FileItemModel` by the configured
  `davbrowse.sort_param.SortParam`s. It hides rows whose names do not contain
  the search text. `rows()` returns the visible source rows in order.
  `search_with_timer` waits 600 ms before it applies the text.
- **Settings.** `davbrowse.settings_json_file.SettingsJsonFile` persists the
  settings in `config.json`: the download path, the log level, the sort
  params and whether search is case-sensitive. A missing or invalid value is
  replaced by its default. `davbrowse.settings.Settings` presents the log
  level as an index into `level_desc_list()`.
- **Logging.** `davbrowse.logger.Logger.get_instance()` is a process-wide,
  level-filtered message store. `install_handler()` attaches a `LogHandler`
  to the `davbrowse` logger of Python's `logging` module.

## Installing

Install with pip or any other installer. Python 3.10 or later is required.
The only dependency is `platformdirs`.

## Examples

Resolving `..` segments in an absolute directory path:

```python
from davbrowse.util import process_two_dots_in_path

process_two_dots_in_path("/test/test2/../../test3/test4/")  # "/test3/test4/"
process_two_dots_in_path("/test/..g/")                      # "/test/..g/"
```

Human-readable sizes, with three significant digits and one of the prefixes
B, K, M, G, T, P or E:

```python
from davbrowse.size_displayer import format_size

format_size(512)    # "512 B"
format_size(1024)   # "1 K"
```

Keeping a list of servers in a directory of your choice:

```python
from davbrowse.data_json_file import DataJsonFile
from davbrowse.server_info import ServerInfo
from davbrowse.server_info_manager import ServerInfoManager

servers = ServerInfoManager(DataJsonFile("/tmp/davbrowse"))
servers.add(ServerInfo("Home NAS", "192.168.0.10", 80, "/dav"))
first = servers.get(0)
servers.remove(0, 1)
```

Requesting a directory listing:

```python
from davbrowse.client import Client

client = Client(lambda reply: print(reply.decode()), lambda error: print(error.name))
client.set_server_info("localhost", 8080)
client.request_file_list("/dav/")
client.wait()
```

Sort params have stable ids: `type`, `name`, `modification_time`,
`creation_time`, `size` and `extension`. `default_sort_params()` returns them
in that order. `sort_param_by_id` and `sort_param_id` convert between a param
and its id.

## What the package does not do

- It does not parse `PROPFIND` replies. `Client` hands you the raw XML. Turning
  it into `FileSystemObject`s is up to you; `FSObjectStruct`, `to_status` and
  `extract_name` help with that.
- It has no object that keeps track of the current directory. `FileItemModel`
  takes a source object that you provide. The source must have
  `is_cur_dir_root_path()`, `curr_dir_object()`, `get_object(index)` and
  `__len__`. It must also have `add_notification_func(obj, func)` and
  `remove_notification_func(obj)`.
- It has no graphical interface and no command-line program.
- It does not download or upload files. It does not send credentials. It
  speaks plain HTTP only.

## Running the tests

Install the `test` extra, then run `pytest`.