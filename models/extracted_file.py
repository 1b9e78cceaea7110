from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from utils.path import parse_path


@dataclass(frozen=True)
class ExtractedFile:
    path: str
    file_name: str
    file_type: str
    content: str

    @classmethod
    def from_entry(cls, entry_name: str, content: str) -> ExtractedFile:
        parsed = parse_path(entry_name)
        return cls(
            path=parsed["path"],
            file_name=parsed["fileName"],
            file_type=parsed["fileType"],
            content=content,
        )

    @property
    def full_name(self) -> str:
        if not self.file_type:
            return self.file_name
        return f"{self.file_name}.{self.file_type}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "path": self.path,
            "fileName": self.file_name,
            "fileType": self.file_type,
            "content": self.content,
        }
