"""
설정값. 환경 변수로 기본값을 바꿀 수 있고, 명령줄 옵션이 환경 변수보다 우선함.

  EXPRTREE_LOG_LEVEL   로그 레벨 (기본 WARNING)
  EXPRTREE_FORMAT      출력 형식 text | json (기본 text)
  EXPRTREE_ASCII_TREE  1/true/yes/on 이면 트리를 ASCII 문자로 그림
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FORMAT = "text"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FORMATS = ("text", "json")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level:     str = DEFAULT_LOG_LEVEL
    output_format: str = DEFAULT_FORMAT
    ascii_tree:    bool = False
    show_tree:     bool = True

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        self.output_format = self.output_format.lower()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"알 수 없는 로그 레벨: {self.log_level!r} (가능: {', '.join(LOG_LEVELS)})"
            )
        if self.output_format not in FORMATS:
            raise ValueError(
                f"알 수 없는 출력 형식: {self.output_format!r} (가능: {', '.join(FORMATS)})"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("EXPRTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            output_format=env.get("EXPRTREE_FORMAT", DEFAULT_FORMAT),
            ascii_tree=env.get("EXPRTREE_ASCII_TREE", "").strip().lower() in _TRUTHY,
        )
