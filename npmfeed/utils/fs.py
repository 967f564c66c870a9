from __future__ import annotations

from pathlib import Path


def append_text(path: Path, text: str) -> None:
    """
    Append text verbatim, creating the file if needed. Line endings are not translated.

    Encoding happens before the file is opened, so unencodable text leaves the file untouched.
    """
    data = text.encode("utf-8")
    with path.open("ab") as f:
        f.write(data)
