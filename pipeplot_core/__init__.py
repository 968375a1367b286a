"""Runtime layer: engine process transport and session configuration."""

from .config import ENV_EXECUTABLE, SessionConfig, config_from_env, config_from_mapping, load_config
from .transport import PipeTransport, StreamTransport, Transport, build_command

__all__ = [
    "ENV_EXECUTABLE",
    "PipeTransport",
    "SessionConfig",
    "StreamTransport",
    "Transport",
    "build_command",
    "config_from_env",
    "config_from_mapping",
    "load_config",
]
