from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional
from monsternav.core.errors import SettingsError
from monsternav.core.logging import logger

SETTINGS_FILENAME = ".monsternav_settings.json"
LOG_LEVELS = {"DEBUG","INFO","WARN","ERROR"}

@dataclass
class SettingsData:
    log_level: str = "INFO"          # DEBUG / INFO / WARN / ERROR
    enemy_turn_delay: float = 1.5    # seconds before the enemy replies
    result_delay: float = 3.0        # seconds between knockout and leaving the battle
    history_lines: int = 3           # battle log lines on screen
    seed: Optional[int] = None       # fixed RNG seed, None for a fresh one

    def normalize(self):
        if self.log_level not in LOG_LEVELS:
            self.log_level = "INFO"
        for name, default in (("enemy_turn_delay", 1.5), ("result_delay", 3.0)):
            val = getattr(self, name)
            if not isinstance(val, (int, float)) or isinstance(val, bool) or val < 0:
                setattr(self, name, default)
        if not isinstance(self.history_lines, int) or isinstance(self.history_lines, bool) or self.history_lines < 1:
            self.history_lines = 3
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            self.seed = None

    @classmethod
    def from_dict(cls, raw: Any) -> "SettingsData":
        if not isinstance(raw, Mapping):
            raise SettingsError(f"settings must be a JSON object, got {type(raw).__name__}")
        # Unknown keys are dropped so older files keep loading
        names = {f.name for f in fields(cls)}
        data = cls(**{k: v for k, v in raw.items() if k in names})
        data.normalize()
        return data

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                data = SettingsData.from_dict(raw)
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, SettingsError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def apply_logging(self):
        logger.set_level(self.data.log_level)

    def update(self, **changes: Any):
        for k, v in changes.items():
            if hasattr(self.data, k):
                setattr(self.data, k, v)
        self.data.normalize()
        self._notify()

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
