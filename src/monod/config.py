from __future__ import annotations

import logging
import os

from monod.documents.document import Template


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self) -> None:
        self.state_file: str = os.environ.get(
            "MONOD_STATE_FILE", ".monod-state.json"
        )
        self.default_template: str = os.environ.get("MONOD_DEFAULT_TEMPLATE", "")
        self.log_level: str = os.environ.get("MONOD_LOG_LEVEL", "WARNING").upper()

    def validate(self) -> None:
        if self.default_template not in {t.value for t in Template}:
            raise ValueError(
                f"MONOD_DEFAULT_TEMPLATE must be one of "
                f"{sorted(t.value for t in Template)}, got {self.default_template!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown MONOD_LOG_LEVEL: {self.log_level}")


settings = Settings()
