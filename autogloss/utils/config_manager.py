"""
Configuration manager for loading and saving settings from YAML/JSON files.
"""
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict, fields
import os
from dotenv import load_dotenv

from ..core.exceptions import ConfigurationError, error_context


@dataclass
class GlossaryConfig:
    """Where glossary sources live and how they are compiled."""
    source_dir: str = "public"
    pattern: str = "**/_glossary.*"
    default_lang: str = "en"
    max_workers: int = 1


@dataclass
class MessagesConfig:
    """Localized labels used in generated markup."""
    path: Optional[str] = None
    fallback_lang: Optional[str] = "en"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    console_level: str = "WARNING"
    max_bytes: int = 10_000_000
    backup_count: int = 5
    use_colors: bool = True
    file_logging: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""
    glossary: GlossaryConfig = field(default_factory=GlossaryConfig)
    messages: MessagesConfig = field(default_factory=MessagesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'glossary': GlossaryConfig,
    'messages': MessagesConfig,
    'logging': LoggingConfig,
}


class ConfigManager:
    """
    Configuration manager for loading/saving application settings.
    Supports YAML and JSON formats, environment variables, and defaults.
    """

    def __init__(self, config_path: Optional[Path] = None, use_env: bool = True):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (YAML or JSON)
            use_env: Apply environment variable overrides (and read ``.env``)
        """
        self.config_path = Path(config_path) if config_path else Path("autogloss.yaml")
        self.use_env = use_env
        self.config: AppConfig = AppConfig()

        if use_env:
            load_dotenv()

        if self.config_path.exists():
            self.load()
        elif use_env:
            self._apply_env_vars()

    def load(self) -> AppConfig:
        """
        Load configuration from file.

        Returns:
            AppConfig instance
        """
        if not self.config_path.exists():
            return self.config

        # Determine format by extension
        with error_context("loading config", ConfigurationError, component="config",
                           path=str(self.config_path)):
            if self.config_path.suffix in ['.yaml', '.yml']:
                data = self._load_yaml()
            elif self.config_path.suffix == '.json':
                data = self._load_json()
            else:
                raise ConfigurationError(
                    f"Unsupported config format: {self.config_path.suffix}", component="config"
                )

            self.config = self._parse_config(data)

        if self.use_env:
            self._apply_env_vars()

        return self.config

    def save(self, config: Optional[AppConfig] = None):
        """
        Save configuration to file.

        Args:
            config: Config to save (uses current if None)
        """
        if config:
            self.config = config

        data = self._config_to_dict(self.config)

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.suffix in ['.yaml', '.yml']:
            self._save_yaml(data)
        elif self.config_path.suffix == '.json':
            self._save_json(data)
        else:
            raise ConfigurationError(
                f"Unsupported config format: {self.config_path.suffix}", component="config"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot notation key.

        Args:
            key: Configuration key (e.g., 'glossary.source_dir', 'logging.log_level')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config

        for part in key.split('.'):
            if hasattr(value, part):
                value = getattr(value, part)
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot notation key.

        Args:
            key: Configuration key
            value: Value to set
        """
        parts = key.split('.')
        obj = self.config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise KeyError(f"Invalid config key: {key}")

        if not hasattr(obj, parts[-1]):
            raise KeyError(f"Invalid config key: {key}")
        setattr(obj, parts[-1], value)

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML config file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def _load_json(self) -> Dict[str, Any]:
        """Load JSON config file."""
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _save_yaml(self, data: Dict[str, Any]):
        """Save config as YAML."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

    def _save_json(self, data: Dict[str, Any]):
        """Save config as JSON."""
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _parse_config(self, data: Dict[str, Any]) -> AppConfig:
        """Parse dictionary to AppConfig."""
        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping", component="config")

        config = AppConfig()

        for section, values in data.items():
            if section not in _SECTIONS:
                raise ConfigurationError(f"Unknown config section: {section}", component="config")

            if values is None:
                values = {}
            elif not isinstance(values, dict):
                raise ConfigurationError(
                    f"Config section '{section}' must be a mapping", component="config"
                )

            section_cls = _SECTIONS[section]
            known = {f.name for f in fields(section_cls)}
            unknown = set(values) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in '{section}': {', '.join(sorted(unknown))}",
                    component="config"
                )
            setattr(config, section, section_cls(**values))

        return config

    def _config_to_dict(self, config: AppConfig) -> Dict[str, Any]:
        """Convert AppConfig to dictionary."""
        return {
            'glossary': asdict(config.glossary),
            'messages': asdict(config.messages),
            'logging': asdict(config.logging),
        }

    def _apply_env_vars(self):
        """Override config with environment variables."""
        if os.getenv('GLOSSARY_DIR'):
            self.config.glossary.source_dir = os.getenv('GLOSSARY_DIR')
        if os.getenv('GLOSSARY_LANG'):
            self.config.glossary.default_lang = os.getenv('GLOSSARY_LANG')

        if os.getenv('MESSAGES_PATH'):
            self.config.messages.path = os.getenv('MESSAGES_PATH')

        if os.getenv('LOG_LEVEL'):
            self.config.logging.log_level = os.getenv('LOG_LEVEL')

    def export_template(self, output_path: Path):
        """
        Export configuration template with comments.

        Args:
            output_path: Path to save template
        """
        template = """# autogloss configuration

# Glossary sources
glossary:
  source_dir: public          # Root searched for glossary files (or env GLOSSARY_DIR)
  pattern: "**/_glossary.*"   # Glob relative to source_dir; parent dir = language
  default_lang: en            # Language used when none is given (or env GLOSSARY_LANG)
  max_workers: 1              # Languages compiled in parallel

# Link labels
messages:
  path: null                  # YAML/JSON file or directory of <lang>.yaml (or env MESSAGES_PATH)
  fallback_lang: en           # Used when a label is missing for a language

# Logging Settings
logging:
  log_dir: logs               # Log directory
  log_level: INFO             # File log level (or env LOG_LEVEL)
  console_level: WARNING      # Console output level
  max_bytes: 10000000         # Max log file size (10MB)
  backup_count: 5             # Number of backup files
  use_colors: true            # Colored console output
  file_logging: false         # Write logs to log_dir
"""

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(template)
