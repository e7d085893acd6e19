"""
Configuration — Default table settings

Config hierarchy (highest to lowest priority):
  1. Environment variables (CONSOLETABLE_STYLE, CONSOLETABLE_ALIGNMENT)
  2. Project config (.consoletable/config.yaml)
  3. User config (~/.consoletable/config.yaml)
  4. Defaults

Example config.yaml:
    table:
      style: heavy_border
      alignment: left
      row_rules: true
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .columns import Aligned
from .styles import STYLES, get_style

logger = logging.getLogger(__name__)


VALID_ALIGNMENTS = ("left", "centre", "center", "right")


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).lower() in ('true', '1', 'yes')


def _as_padding(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass
class TableConfig:
    """Defaults applied to new tables."""
    style: str = "auto"        # "auto" | any name in STYLES
    alignment: str = "right"   # "left" | "centre" | "right"
    borders: bool = True
    row_rules: bool = False
    left_padding: Optional[str] = None   # None = the style's padding
    right_padding: Optional[str] = None

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        style = self.style.lower().replace('-', '_')
        if style != "auto" and style not in STYLES:
            valid = ", ".join(STYLES.keys())
            return f"Unknown style '{self.style}'. Valid: auto, {valid}"

        if self.alignment.lower() not in VALID_ALIGNMENTS:
            return f"Unknown alignment '{self.alignment}'. Valid: left, centre, right"

        for name in ("left_padding", "right_padding"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                return f"Invalid {name} {value!r}. Must be text"
        return None

    def apply(self, table):
        """
        Configure table with these settings.

        Raises:
            ValueError: If style or alignment is unknown
        """
        table.with_style(get_style(self.style))
        table.with_alignment(Aligned.parse(self.alignment))
        table.with_borders(self.borders)
        table.with_row_rules(self.row_rules)
        if self.left_padding is not None:
            table.left_padding = self.left_padding
        if self.right_padding is not None:
            table.right_padding = self.right_padding
        return table

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = {
            "style": self.style,
            "alignment": self.alignment,
            "borders": self.borders,
            "row_rules": self.row_rules,
        }
        if self.left_padding is not None:
            data["left_padding"] = self.left_padding
        if self.right_padding is not None:
            data["right_padding"] = self.right_padding
        return {"table": data}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TableConfig':
        """Create from dictionary."""
        table_data = data.get("table") or {}
        if not isinstance(table_data, dict):
            table_data = {}
        return cls(
            style=str(table_data.get("style", "auto")),
            alignment=str(table_data.get("alignment", "right")),
            borders=_as_bool(table_data.get("borders", True)),
            row_rules=_as_bool(table_data.get("row_rules", False)),
            left_padding=_as_padding(table_data.get("left_padding")),
            right_padding=_as_padding(table_data.get("right_padding")),
        )


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment variables
      2. Project config (.consoletable/config.yaml)
      3. User config (~/.consoletable/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".consoletable"
    PROJECT_CONFIG_DIR = ".consoletable"
    PROJECT_CONFIG_FILE = "config.yaml"

    SETTINGS = ("style", "alignment", "borders", "row_rules", "left_padding", "right_padding")

    def __init__(self, project_dir: Optional[Path] = None, user_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.user_dir = Path(user_dir) if user_dir else self.USER_CONFIG_DIR
        self._config: Optional[TableConfig] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.PROJECT_CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.user_dir / self.PROJECT_CONFIG_FILE

    def load(self) -> TableConfig:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        # Layer 1: User config
        config_data = self._merge(config_data, self._read(self.user_config_path))

        # Layer 2: Project config (higher priority)
        config_data = self._merge(config_data, self._read(self.project_config_path))

        # Layer 3: Environment overrides
        overrides = {}
        if os.environ.get("CONSOLETABLE_STYLE"):
            overrides["style"] = os.environ["CONSOLETABLE_STYLE"]
        if os.environ.get("CONSOLETABLE_ALIGNMENT"):
            overrides["alignment"] = os.environ["CONSOLETABLE_ALIGNMENT"]
        if overrides:
            config_data = self._merge(config_data, {"table": overrides})

        self._config = TableConfig.from_dict(config_data)
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML config file; unreadable files are skipped."""
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: not a mapping", path)
            return {}
        if "table" in data and not isinstance(data["table"], dict):
            logger.warning("Ignoring table section of %s: not a mapping", path)
            data = {key: value for key, value in data.items() if key != "table"}
        return data

    def save_project(self, config: TableConfig):
        """Save configuration to project config file."""
        self._write(self.project_config_path, config)

    def save_user(self, config: TableConfig):
        """Save configuration to user config file."""
        self._write(self.user_config_path, config)

    def _write(self, path: Path, config: TableConfig):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding="utf-8") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, allow_unicode=True)
        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "table.style")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'table.style')"

        section, setting = parts
        if section != "table":
            return f"Unknown section: {section}. Valid: table"
        if setting not in self.SETTINGS:
            return f"Unknown table setting: {setting}. Valid: {', '.join(self.SETTINGS)}"

        if setting in ("borders", "row_rules"):
            setattr(config, setting, _as_bool(value))
        else:
            setattr(config, setting, value)

        error = config.validate()
        if error:
            self._config = None
            return error

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2 or parts[0] != "table" or parts[1] not in self.SETTINGS:
            return None

        value = getattr(config, parts[1])
        if isinstance(value, bool):
            return str(value).lower()
        return value

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result


def load_config(project_dir: Optional[Path] = None) -> TableConfig:
    """Load configuration for a project directory."""
    return ConfigManager(project_dir).load()
