from dataclasses import dataclass, field
from typing import Optional

from stats_browser.config import AppSettings
from stats_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    settings: AppSettings = field(default_factory=AppSettings)
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
