from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os


@dataclass
class AppConfig:
    root: Path
    logs_dir: Path

    @classmethod
    def load(cls) -> "AppConfig":
        root = Path(__file__).resolve().parents[1]

        def env_path(var: str, default: Path) -> Path:
            v = os.getenv(var)
            if not v:
                return default
            p = Path(v).expanduser()
            return p if p.is_absolute() else (root / p)

        return cls(
            root=root,
            logs_dir=env_path("USER_RECORDS_LOG_DIR", root / "logs"),
        )

    @classmethod
    def from_args(cls, args) -> "AppConfig":
        cfg = cls.load()
        if getattr(args, "log_dir", None):
            p = Path(args.log_dir).expanduser()
            cfg.logs_dir = p if p.is_absolute() else Path.cwd() / p
        return cfg

    def pretty_lines(self) -> list[str]:
        return [
            "Resolved configuration:",
            f"root          : {self.root}",
            f"logs_dir      : {self.logs_dir}",
        ]
