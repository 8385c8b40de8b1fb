"""Path helpers shared across the package."""


def process_two_dots_in_path(path: str) -> str:
    """Collapse ``..`` segments in an absolute directory path.

    The path must start and end with a slash.  A path without any ``..``
    segment is returned unchanged.
    """
    if not path or not path.startswith("/") or not path.endswith("/"):
        raise ValueError(f"expected an absolute directory path, got {path!r}")
    if len(path) == 1:
        return path

    dirs: list[str] = []
    after_slash = False
    dots = 0
    start = 0
    collapsed = False
    for pos, ch in enumerate(path):
        if ch == "/":
            if after_slash and dots == 2:
                if not dirs:
                    raise ValueError(f"path goes above the root: {path!r}")
                dirs.pop()
                collapsed = True
            elif start != pos:
                dirs.append(path[start:pos])
            after_slash = True
            dots = 0
            start = pos
        elif ch == ".":
            dots += 1
        else:
            after_slash = False

    if not collapsed:
        return path
    return "".join(dirs) + "/"