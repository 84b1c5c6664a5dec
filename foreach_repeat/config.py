"""Configuration system for foreach_repeat.
Supports TOML configuration files with project-level and user-level settings.
The only configurable concern is logging: the loop itself takes no options.
Example ``foreach_repeat.toml``:
    [logging]
    level = "trace"
    color = false
    log_file = "loop.log"
    max_entries = 500
``max_entries`` bounds how many log entries are kept in memory.
The same keys live under ``[tool.foreach_repeat.logging]`` in pyproject.toml.
"""
from __future__ import annotations
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from foreach_repeat.core.exceptions import ConfigError
from foreach_repeat.logging import (
    DEFAULT_MAX_ENTRIES,
    ForEachRepeatLogger,
    LogLevel,
    configure_logging,
)
CONFIG_FILES = [
    "foreach_repeat.toml",
    ".foreach_repeat.toml",
    "pyproject.toml",
]
@dataclass
class LoggingConfig:
    """Configuration for the package logger."""
    level: str = "normal"
    color: bool = True
    log_file: str | None = None
    show_time: bool = True
    max_entries: int = DEFAULT_MAX_ENTRIES
    @property
    def log_level(self) -> LogLevel:
        """The configured level as a LogLevel."""
        return LogLevel.from_name(self.level)
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "color": self.color,
            "log_file": self.log_file,
            "show_time": self.show_time,
            "max_entries": self.max_entries,
        }
@dataclass
class ForEachRepeatConfig:
    """Main configuration for foreach_repeat."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    project_root: Path | None = None
    config_file: Path | None = None
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "logging": self.logging.to_dict(),
        }
    def to_toml(self) -> str:
        """Generate TOML configuration string."""
        lines = ["[logging]"]
        for key, value in self.logging.to_dict().items():
            if isinstance(value, bool):
                lines.append(f"{key} = {str(value).lower()}")
            elif value is None:
                continue
            elif isinstance(value, str):
                lines.append(f'{key} = "{value}"')
            else:
                lines.append(f"{key} = {value}")
        return "\n".join(lines) + "\n"
def _tool_table(data: dict[str, Any]) -> Any:
    """The [tool.foreach_repeat] value, or None when absent or not reachable."""
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    return tool.get("foreach_repeat")
def _has_tool_section(path: Path) -> bool:
    """Whether a pyproject.toml carries a [tool.foreach_repeat] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return False
    return isinstance(_tool_table(data), dict)
def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file by walking up directory tree."""
    if start_dir is None:
        start_dir = Path.cwd()
    current = Path(start_dir).resolve()
    while True:
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if not config_path.is_file():
                continue
            if config_name == "pyproject.toml" and not _has_tool_section(config_path):
                continue
            return config_path
        if current == current.parent:
            break
        current = current.parent
    home = Path.home()
    for config_name in [".foreach_repeat.toml", "foreach_repeat.toml"]:
        config_path = home / config_name
        if config_path.is_file():
            return config_path
    return None
def load_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> ForEachRepeatConfig:
    """Load configuration from file or use defaults.
    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching for config
    Returns:
        Loaded configuration
    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    config = ForEachRepeatConfig()
    if config_path is None:
        config_path = find_config_file(start_dir)
    if config_path is None or not Path(config_path).exists():
        return config
    config_path = Path(config_path)
    config.config_file = config_path
    config.project_root = config_path.parent
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to parse config file: {e}", config_path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"config file is not valid UTF-8: {e}", config_path) from e
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e}", config_path) from e
    section = _tool_table(data)
    if section is None and config_path.name != "pyproject.toml":
        if "tool" in data and not isinstance(data["tool"], dict):
            raise ConfigError("'tool' must be a table", config_path)
        section = data
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError("[tool.foreach_repeat] must be a table", config_path)
    _apply_config(config, section, config_path)
    return config
def _apply_config(config: ForEachRepeatConfig, data: dict[str, Any], path: Path) -> None:
    """Apply configuration data to config object."""
    if "logging" not in data:
        return
    log_data = data["logging"]
    if not isinstance(log_data, dict):
        raise ConfigError("[logging] must be a table", path)
    if "level" in log_data:
        level = str(log_data["level"])
        try:
            LogLevel.from_name(level)
        except ValueError as e:
            raise ConfigError(str(e), path) from e
        config.logging.level = level.strip().lower()
    for key in ["color", "show_time"]:
        if key in log_data:
            if not isinstance(log_data[key], bool):
                raise ConfigError(f"logging.{key} must be true or false", path)
            setattr(config.logging, key, log_data[key])
    if "log_file" in log_data:
        log_file = log_data["log_file"]
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError("logging.log_file must be a string", path)
        config.logging.log_file = log_file
    if "max_entries" in log_data:
        max_entries = log_data["max_entries"]
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 0:
            raise ConfigError("logging.max_entries must be a non-negative integer", path)
        config.logging.max_entries = max_entries
def apply_config(config: ForEachRepeatConfig) -> ForEachRepeatLogger:
    """Configure the global logger from a loaded configuration.
    A relative ``log_file`` is resolved against the directory holding the
    config file.
    """
    file_path = None
    if config.logging.log_file:
        file_path = Path(config.logging.log_file)
        if not file_path.is_absolute() and config.project_root is not None:
            file_path = config.project_root / file_path
    return configure_logging(
        level=config.logging.log_level,
        color=config.logging.color,
        file_path=file_path,
        show_time=config.logging.show_time,
        max_entries=config.logging.max_entries,
    )
def generate_default_config() -> str:
    """Generate default configuration file content."""
    config = ForEachRepeatConfig()
    return config.to_toml()
def init_config(directory: Path | None = None) -> Path:
    """Initialize a new configuration file in the given directory.
    Args:
        directory: Directory to create config in (default: current)
    Returns:
        Path to created config file
    """
    if directory is None:
        directory = Path.cwd()
    config_path = Path(directory) / "foreach_repeat.toml"
    if config_path.exists():
        raise FileExistsError(f"Config file already exists: {config_path}")
    content = generate_default_config()
    config_path.write_text(content, encoding="utf-8")
    return config_path
__all__ = [
    "ForEachRepeatConfig",
    "LoggingConfig",
    "load_config",
    "apply_config",
    "find_config_file",
    "generate_default_config",
    "init_config",
]
