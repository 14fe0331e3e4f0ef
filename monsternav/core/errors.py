"""
Error classes for clearer exception sources.

Turn-order violations are not errors; the battle session ignores them.
"""
from __future__ import annotations

class MonsterNavError(Exception):
    pass

class ContentError(MonsterNavError):
    def __init__(self, subject: str, detail: str):
        super().__init__(f"Invalid content '{subject}': {detail}")
        self.subject = subject
        self.detail = detail

class SettingsError(MonsterNavError):
    pass
