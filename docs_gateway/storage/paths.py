"""Path-sanitization policy for client-supplied document ids and file paths.

Every path goes through the same three steps before touching the disk:

1. `reject_traversal`: textual check, any `..` substring is refused
2. `clean_path`: lexical clean (separators collapsed, `.` segments dropped)
3. `resolve_under`: join beneath the root and verify the result stays there

Step 3 is a containment check on top of the textual one; for inputs that
pass step 1 it only ever refuses paths that would have escaped the root.
"""

import os
from pathlib import Path
from typing import Union

from ..core.errors import InvalidPathError

JSON_SUFFIX = ".json"
MDX_SUFFIX = ".mdx"


def reject_traversal(path: str, message: str = "Invalid file path") -> None:
    """Raise InvalidPathError if `path` contains `..` anywhere."""
    if ".." in path:
        raise InvalidPathError(message)


def clean_path(path: str) -> str:
    """
    Return the shortest lexically equivalent slash-separated path.

    Examples:
        "docs//guide/./intro" -> "docs/guide/intro"
        "/guide/"             -> "/guide"
        ""                    -> "."
    """
    if not path:
        return "."

    rooted = path.startswith("/")
    parts = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)

    cleaned = "/".join(parts)
    if rooted:
        return "/" + cleaned
    return cleaned or "."


def resolve_under(root: Union[str, Path], rel_path: str, message: str = "Invalid file path") -> Path:
    """
    Join a cleaned relative path beneath `root` and verify containment.

    A leading slash is treated as relative to the root, not as an
    absolute path.
    """
    if "\x00" in rel_path:
        raise InvalidPathError(message)

    root_str = os.path.normpath(str(root))
    candidate = os.path.normpath(os.path.join(root_str, rel_path.lstrip("/")))
    if os.path.commonpath([root_str, candidate]) != root_str:
        raise InvalidPathError(message)
    return Path(candidate)


def document_filename(doc_id: str) -> str:
    """Append `.json` to a cleaned document id unless already present."""
    if doc_id.endswith(JSON_SUFFIX):
        return doc_id
    return doc_id + JSON_SUFFIX


def rename_filename(path: str) -> str:
    """
    Map a cleaned path to the `.json` file a rename operates on.

    "a.mdx" -> "a.json", "b" -> "b.json", "c.json" -> "c.json".
    Only `.mdx` is stripped; any other extension is kept and `.json` is
    appended after it.
    """
    if path.endswith(JSON_SUFFIX):
        return path
    if path.endswith(MDX_SUFFIX):
        path = path[: -len(MDX_SUFFIX)]
    return path + JSON_SUFFIX
