"""Global configuration management (~/.leetcode_py.global)."""

import json
from pathlib import Path
from typing import Dict, Optional
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://leetcode.com"


@dataclass
class GlobalConfig:
    """
    Global configuration storing the site url and session cookies.
    Stored at ~/.leetcode_py.global
    """

    csrftoken: str = ""
    session: str = ""
    base_url: str = DEFAULT_BASE_URL

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".leetcode_py.global"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file."""
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                return cls(
                    csrftoken=data.get("csrftoken", ""),
                    session=data.get("session", ""),
                    base_url=data.get("base_url", DEFAULT_BASE_URL),
                )
        except (json.JSONDecodeError, IOError, AttributeError):
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = self.default_path()

        data = {
            "csrftoken": self.csrftoken,
            "session": self.session,
            "base_url": self.base_url,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def has_credentials(self) -> bool:
        """Check if session cookies are stored."""
        return bool(self.csrftoken and self.session)

    def cookies(self) -> Dict[str, str]:
        """Cookies to send with every request."""
        if not self.has_credentials():
            return {}
        return {"csrftoken": self.csrftoken, "LEETCODE_SESSION": self.session}
