from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import ContinuationStyle


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROMSCONF_", case_sensitive=False)

    dest_root: Path | None = None
    file_mode: str = "0644"
    continuation_marker: str = " \\"
    continuation_indent: str | None = None

    def continuation_style(self) -> ContinuationStyle:
        return ContinuationStyle(
            marker=self.continuation_marker, indent=self.continuation_indent
        )
