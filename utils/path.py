import re
from typing import Dict, Final

SEPARATOR_RE: Final = re.compile(r"[/\\]")


def parse_path(file_path: str) -> Dict[str, str]:
    parts = SEPARATOR_RE.split(file_path)
    base_name = parts.pop()

    # last dot wins: "archive.tar.gz" -> ("archive.tar", "gz")
    file_name, dot, file_type = base_name.rpartition(".")
    if not dot:
        file_name, file_type = base_name, ""

    return {
        "path": "/".join(parts) + "/",
        "fileName": file_name,
        "fileType": file_type,
    }


def is_directory_entry(name: str) -> bool:
    return name.endswith(("/", "\\"))
