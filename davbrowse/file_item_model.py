"""A list model over the entries of the current directory."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Protocol

from .filesystem_object import FileSystemObject, ObjectType
from .size_displayer import format_size
from .sort_param import FileItemRole

_log = logging.getLogger(__name__)

_FOLDER_ICON = "folder.png"
_UNKNOWN_ICON = "unknown.png"
_UNKNOWN_TIME = "unknown"
_EXIT_NAME = ".."

_BASE_ROLE_NAMES = {
    0: "display",
    1: "decoration",
    2: "edit",
    3: "toolTip",
    4: "statusTip",
    5: "whatsThis",
}

_EXTENSIONS_BY_ICON = {
    "application-apk.png": "apk",
    "application-epub+zip.png": "epub",
    "application-geo+json.png": "geojson",
    "application-illustrator.png": "ai ait",
    "application-json.png": "json",
    "application-msexcel.png": "xlsx xlsm xlsb xltx xltm xls xlam xla xlw xlr",
    "application-octet-stream.png": "a lib obj",
    "application-pdf.png": "pdf",
    "application-pgp-encrypted.png": "pgp",
    "application-pgp-keys.png": "asc",
    "application-pgp-signature.png": "sig",
    "application-photoshop.png": "psd psdc",
    "application-postscript.png": "ps",
    "application-rss+xml.png": "rss",
    "application-vnd-dart.png": "dart",
    "application-vnd.debian.binary-package.png": "deb",
    "application-vnd.flatpak.png": "flatpak",
    "application-vnd.iccprofile.png": "icc icm",
    "application-vnd.ms-access.png": (
        "adn accdb accdr accdt accda mdw accde mam maq mar mat maf laccdb ade adp "
        "mdb cdb mda mdn mdf mde ldb"
    ),
    "application-vnd.ms-powerpoint.png": "pptx pptm ppt potx potm pot ppsx ppsm pps ppam ppa",
    "application-vnd.ms-publisher.png": "pub",
    "application-vnd.ms-word.png": "doc dot wbk docx docm dotx dotm docb wll wwl",
    "application-vnd.oasis.opendocument.drawing.png": "odg fodg",
    "application-vnd.openofficeorg.extension.png": "oxt",
    "application-vnd.snap.png": "snap",
    "application-vnd.squashfs.png": "sfs",
    "application-x-7z-compressed.png": "7z",
    "application-x-apple-diskimage.png": "dmg",
    "application-x-audacity-project.png": "aup3",
    "application-x-bittorrent.png": "torrent",
    "application-x-cd-image.png": "iso",
    "application-x-desktop.png": "desktop",
    "application-x-executable.png": "exe dll so",
    "application-x-firmware.png": "bin hex",
    "application-x-gzip.png": "gzip gz",
    "application-x-hwp.png": "hwp",
    "application-x-ipynb+json.png": "ipynb",
    "application-x-java.png": "java",
    "application-x-karbon.png": "karbon",
    "application-x-krita.png": "kra",
    "application-x-lmms-project.png": "mmpz mmp",
    "application-x-mobipocket-ebook.png": "ebook",
    "application-x-model.png": "model",
    "application-x-ms-dos-executable.png": "com",
    "application-x-mswinurl.png": "url",
    "application-x-musescore3.png": "mscz mscx",
    "application-x-perl.png": "pl",
    "application-x-php.png": "php",
    "application-x-pkcs7-certificates.png": "p7b p7s p7m p7c p7r",
    "application-x-python-bytecode.png": "pyc pyo pyd",
    "application-x-qemu-disk.png": "qcow",
    "application-x-rar.png": "rar",
    "application-x-raw-disk-image.png": "img",
    "application-x-shellscript.png": "bat cmd btm",
    "application-x-subrip.png": "srt",
    "application-x-theme.png": "theme",
    "application-x-virtualbox-hdd.png": "hdd",
    "application-x-virtualbox-ova.png": "ova",
    "application-x-virtualbox-ovf.png": "ovf",
    "application-x-virtualbox-vbox-extpack.png": "vbox-extpack",
    "application-x-virtualbox-vbox.png": "vbox",
    "application-x-virtualbox-vdi.png": "vdi",
    "application-x-virtualbox-vhd.png": "vhd",
    "application-x-virtualbox-vmdk.png": "vmdk",
    "application-x-yaml.png": "yaml yml",
    "application-x-zip.png": "zip",
    "audio-midi.png": "midi",
    "audio-x-flac.png": "flac",
    "audio-x-generic.png": "ac3 aa3 at3 at9 atp hma oma omg 3gp aac mpc mp+ mpp",
    "audio-x-mpeg.png": "mp3",
    "audio-x-mpegurl.png": "m3u m3u8",
    "audio-x-ms-wma.png": "wma",
    "audio-x-vorbis+ogg.png": "ogg ogv oga ogx ogm spx opus",
    "audio-x-wav.png": "wav",
    "font-x-generic.png": "ttf otf woff woff2 eot",
    "html-template.png": "tmpl",
    "image-svg+xml.png": "svg",
    "image-x-cursor.png": "cur",
    "image-x-generic.png": (
        "jpg jpeg jpe jif jfif jfi gif png jp2 j2k jpf jpm jpg2 j2c jpc jpx mj2 webp "
        "hdr heif heifs heic heics avci avcs hif avif jxl tiff tif bmp dib pbm pgm "
        "ppm pnm bpg drw ecw fits fit fts flif ico iff lbm jxr hdp wdp liff nrrd "
        "pam pgf sid"
    ),
    "image-x-xcf.png": "xcf",
    "libreoffice-oasis-database.png": "odb fodb",
    "libreoffice-oasis-formula.png": "odf",
    "libreoffice-oasis-master-document.png": "otm",
    "libreoffice-oasis-presentation.png": "odp fodp",
    "libreoffice-oasis-spreadsheet.png": "ods fods",
    "libreoffice-oasis-text.png": "odt fodt",
    "message-rfc822.png": "eml",
    "package-x-generic.png": "pkg rpm xz",
    "rom.png": "rom",
    "shellscript.png": "sh",
    "text-css.png": "css",
    "text-dockerfile.png": "docker",
    "text-html.png": "html",
    "text-less.png": "less",
    "text-markdown.png": "md markdown",
    "text-richtext.png": "rtf",
    "text-rust.png": "rs",
    "text-x-arduino.png": "ino",
    "text-x-c++hdr.png": "hpp",
    "text-x-chdr.png": "h",
    "text-x-cobol.png": "cbl cob cpy",
    "text-x-copying.png": "copy",
    "text-x-c.png": "c",
    "text-x-cpp.png": "cpp",
    "text-x-csharp.png": "cs",
    "text-x-fortran.png": "f90 f95 f03 f",
    "text-x.gcode.png": "gcode mpt mpf nc",
    "text-x-generic.png": "txt",
    "text-x-gettext-translation.png": "po",
    "text-x-go.png": "go",
    "text-x-haskell.png": "hs lhs",
    "text-x-install.png": "install",
    "text-x-javascript.png": "js",
    "text-x-lilypond.png": "ly ily",
    "text-x-log.png": "log",
    "text-x-lua.png": "lua",
    "text-x-makefile.png": "makefile",
    "text-xml.png": "xml",
    "text-x-nim.png": "nim nims nimble",
    "text-x-patch.png": "patch",
    "text-x-python.png": "py",
    "text-x-qml.png": "qml",
    "text-x-readme.png": "readme",
    "text-x-r.png": "r rdata rhistory rds rda",
    "text-x-ruby.png": "rb ru",
    "text-x-sass.png": "sass scss",
    "text-x-scala.png": "scala sc",
    "text-x-script.png": "la",
    "text-x-sql.png": "sql",
    "text-x-systemd-unit.png": (
        "service socket device mount automount swap target path timer slice scope"
    ),
    "text-x-tex.png": "tex",
    "text-x-typescript.png": "ts tsx",
    "text-x-vala.png": "vala vapi",
    "video-x-generic.png": (
        "webm mkv mk3d mka mks flv fla f4v f4a f4b f4p vob ifo bup drc gifv mng avi "
        "m2t m2ts mts mov movie qt wmv yuv rm rma rmi rmv rmvb rmhd rmm ra ram viv "
        "asf amv mtv mp4 m4a m4p m4b m4r m4v mpeg mpg mpe mp1 mp2 m1v m1a m2a m2v "
        "mpa mpv svi mxf"
    ),
}


def _invert(extensions_by_icon: dict[str, str]) -> dict[str, str]:
    icon_by_extension: dict[str, str] = {}
    for icon, extensions in extensions_by_icon.items():
        for ext in extensions.split():
            icon_by_extension.setdefault(ext, icon)
    return icon_by_extension


_ICON_BY_EXTENSION = _invert(_EXTENSIONS_BY_ICON)

_WIDE_ICONS = frozenset(
    {
        "application-x-executable.png",
        "application-x-karbon.png",
        "application-x-krita.png",
        "application-x-model.png",
        "application-x-ms-dos-executable.png",
        "folder.png",
        "image-svg+xml.png",
        "image-x-generic.png",
        "image-x-xcf.png",
        "video-x-generic.png",
    }
)


class _FileSystemSource(Protocol):
    def is_cur_dir_root_path(self) -> bool: ...

    def curr_dir_object(self) -> FileSystemObject: ...

    def get_object(self, index: int) -> FileSystemObject: ...

    def __len__(self) -> int: ...

    def add_notification_func(self, obj: object, func: Callable[[], None]) -> None: ...

    def remove_notification_func(self, obj: object) -> None: ...


def _extension(name: str) -> Optional[str]:
    pos = name.rfind(".")
    if pos == -1 or pos == len(name) - 1:
        return None
    return name[pos + 1 :].lower()


def icon_name_for_file(name: str) -> str:
    """Return the icon file for a file name, chosen by its extension."""
    ext = _extension(name)
    if ext is None:
        return _UNKNOWN_ICON
    return _ICON_BY_EXTENSION.get(ext, _UNKNOWN_ICON)


def _time_to_string(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone().strftime("%c")


class FileItemModel:
    """Rows are the entries of the current directory.

    Outside the root directory the first row leads to the parent directory.
    """

    def __init__(self, source: _FileSystemSource) -> None:
        _log.debug("The source file item model is being created")
        self._source = source
        self._source.add_notification_func(self, self.update)
        self._root = self._source.is_cur_dir_root_path()

    def __enter__(self) -> "FileItemModel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def row_count(self) -> int:
        return len(self._source) + (0 if self._root else 1)

    def data(self, row: int, role: int) -> Any:
        """Return the value for ``role`` of the entry at ``row``, or None."""
        if role < FileItemRole.NAME or role >= FileItemRole.ENUM_SIZE:
            return None
        role = FileItemRole(role)
        is_exit = not self._root and row == 0
        if role is FileItemRole.IS_EXIT:
            return is_exit

        obj = self._get_object(row)
        if role is FileItemRole.NAME:
            return _EXIT_NAME if is_exit else obj.name
        if role is FileItemRole.EXTENSION:
            if obj.type is ObjectType.DIRECTORY:
                return None
            return _extension(obj.name)
        if role is FileItemRole.ICON_NAME:
            return self._icon_name(obj, row)
        if role is FileItemRole.WIDE_IMAGE_WIDTH_FLAG:
            return self._icon_name(obj, row) in _WIDE_ICONS
        if role is FileItemRole.CREATION_TIME:
            return obj.creation_time
        if role is FileItemRole.CREATION_TIME_STR:
            if obj.creation_time is None:
                return _UNKNOWN_TIME
            return _time_to_string(obj.creation_time)
        if role is FileItemRole.MOD_TIME:
            return obj.modification_time
        if role is FileItemRole.MOD_TIME_STR:
            if obj.modification_time is None:
                return _UNKNOWN_TIME
            return _time_to_string(obj.modification_time)
        if role is FileItemRole.FILE_FLAG:
            return obj.type is ObjectType.FILE
        if role is FileItemRole.SIZE:
            return obj.size
        if role is FileItemRole.SIZE_STR:
            return "" if obj.size is None else format_size(obj.size)
        return None

    def role_names(self) -> dict[int, str]:
        names = dict(_BASE_ROLE_NAMES)
        names[FileItemRole.NAME] = "name"
        names[FileItemRole.EXTENSION] = "extension"
        names[FileItemRole.ICON_NAME] = "iconName"
        names[FileItemRole.WIDE_IMAGE_WIDTH_FLAG] = "needsWideImageWidth"
        names[FileItemRole.CREATION_TIME_STR] = "creationTime"
        names[FileItemRole.MOD_TIME_STR] = "modificationTime"
        names[FileItemRole.FILE_FLAG] = "isFile"
        names[FileItemRole.SIZE_STR] = "size"
        return names

    def update(self) -> None:
        """Refresh after the source has loaded a new directory."""
        self._root = self._source.is_cur_dir_root_path()

    def close(self) -> None:
        """Stop listening to the source."""
        _log.debug("The source file item model is being destroyed")
        self._source.remove_notification_func(self)

    def _get_object(self, row: int) -> FileSystemObject:
        if row == 0 and not self._root:
            return self._source.curr_dir_object()
        return self._source.get_object(row - (0 if self._root else 1))

    def _icon_name(self, obj: FileSystemObject, row: int) -> str:
        if obj.type is ObjectType.DIRECTORY or (not self._root and row == 0):
            return _FOLDER_ICON
        return icon_name_for_file(obj.name)