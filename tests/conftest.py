"""
Pytest configuration and fixtures
"""
import io
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def build_zip(entries) -> bytes:
    """Build an in-memory zip from (name, content) pairs; content None adds a directory entry."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries:
            if content is None:
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def sample_zip() -> bytes:
    return build_zip([
        ("packs/", None),
        ("packs/items/", None),
        ("packs/items/sword.json", '{"name": "Sword", "damage": [1, 6]}'),
        ("packs/readme.txt", "hello"),
        ("root.md", "# title"),
    ])


class RecordingLogger:
    def __init__(self):
        self.calls = []

    def __call__(self, message: str, is_header: bool = False) -> None:
        self.calls.append((message, is_header))


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()
