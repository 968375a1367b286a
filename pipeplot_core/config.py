from __future__ import annotations

from dataclasses import dataclass, fields, replace
import os
from pathlib import Path
import tomllib
from typing import Mapping

ENV_EXECUTABLE = "PIPEPLOT_GNUPLOT"


@dataclass(frozen=True)
class SessionConfig:
    executable: str = "gnuplot"
    persist: bool = True
    teardown_delay_s: float = 1.0
    close_timeout_s: float | None = None
    encoding: str = "utf8"
    fill_style: str = "solid 0.5"

    def __post_init__(self) -> None:
        if not self.executable.strip():
            raise ValueError("executable must not be empty")
        if self.teardown_delay_s < 0:
            raise ValueError("teardown_delay_s must be >= 0")
        if self.close_timeout_s is not None and self.close_timeout_s <= 0:
            raise ValueError("close_timeout_s must be > 0")


def load_config(path: str | Path) -> SessionConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    section = raw.get("session", raw)
    if not isinstance(section, dict):
        raise ValueError("session must be a table")
    return config_from_mapping(section)


def config_from_mapping(raw: Mapping[str, object], base: SessionConfig | None = None) -> SessionConfig:
    base = base or SessionConfig()
    known = {f.name for f in fields(SessionConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError("unknown config field(s): " + ", ".join(unknown))
    updates: dict[str, object] = {}
    for name, value in raw.items():
        if name in ("executable", "encoding", "fill_style"):
            updates[name] = _coerce_str(value, name)
        elif name == "persist":
            updates[name] = _coerce_bool(value, name)
        else:
            updates[name] = _coerce_float(value, name)
    return replace(base, **updates)


def config_from_env(base: SessionConfig | None = None, env: Mapping[str, str] | None = None) -> SessionConfig:
    base = base or SessionConfig()
    env = os.environ if env is None else env
    executable = env.get(ENV_EXECUTABLE)
    if executable:
        return replace(base, executable=executable)
    return base


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _coerce_bool(value: object, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return value


def _coerce_float(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)
