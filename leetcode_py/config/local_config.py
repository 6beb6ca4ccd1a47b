"""Local configuration management (.leetcode_py.local)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


DEFAULT_LANG = "python3"


@dataclass
class LocalConfig:
    """
    Local configuration for project-specific settings.
    Stored at .leetcode_py.local in project directory.
    Stores only the default language slug.
    """

    default_lang: str = DEFAULT_LANG

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Optional["LocalConfig"]:
        """
        Load local config from file.
        If path is not specified, searches upward from current directory.
        """
        if path is None:
            path = cls.find_config()

        if path is None or not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                return cls(default_lang=data.get("default_lang", DEFAULT_LANG))
        except (json.JSONDecodeError, IOError, AttributeError):
            return None

    def save(self, path: Optional[Path] = None) -> None:
        """Save local config to file."""
        if path is None:
            path = Path.cwd() / ".leetcode_py.local"

        data = {"default_lang": self.default_lang}

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @staticmethod
    def find_config(start: Optional[Path] = None) -> Optional[Path]:
        """Nearest .leetcode_py.local in ``start`` (default: cwd) or one of its parents."""
        start = start or Path.cwd()
        for directory in (start, *start.parents):
            candidate = directory / ".leetcode_py.local"
            if candidate.is_file():
                return candidate
        return None
