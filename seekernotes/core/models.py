from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Config:
    """
    The single persisted settings record.

    JSON layout mirrors what the front-end reads:
        {"userSelectedDirectory": "/abs/path"}
    """
    user_selected_directory: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"userSelectedDirectory": self.user_selected_directory}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        # unknown keys are ignored, missing/null ones fall back to ""
        raw = data.get("userSelectedDirectory")
        if raw is None:
            raw = ""
        if not isinstance(raw, str):
            raise TypeError(f"userSelectedDirectory must be a string, got {type(raw).__name__}")
        return cls(user_selected_directory=raw)


@dataclass(frozen=True)
class NoteFile:
    name: str
    content: str
    html_content: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "content": self.content,
            "htmlContent": self.html_content,
        }
