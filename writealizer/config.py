from dataclasses import dataclass, field, is_dataclass
from pathlib import Path

import yaml


DEFAULT_CONFIG_PATH = Path("config/default.yaml")
EXTDATA_DIR = Path(__file__).resolve().parent / "extdata"


@dataclass(slots=True)
class IdentifierConfig:
    separator: str = "\\"
    segment: int = -1


@dataclass(slots=True)
class ModelConfig:
    model_dir: str | None = None
    suffix: str = ".joblib"
    ensembles: dict = field(default_factory=dict)

    def resolve_dir(self):
        return Path(self.model_dir) if self.model_dir else EXTDATA_DIR


@dataclass(slots=True)
class ExportConfig:
    directory: str | None = None

    def resolve_dir(self):
        return Path(self.directory) if self.directory else Path.cwd()


@dataclass(slots=True)
class WriteAlizerConfig:
    """Top-level settings shared by the importers, the predictor and the exporter."""

    identifier: IdentifierConfig = field(default_factory=IdentifierConfig)
    models: ModelConfig = field(default_factory=ModelConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def _load_yaml(path):
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return data or {}


def _merge_config(instance, values):
    for field_name, field_value in values.items():
        if not hasattr(instance, field_name):
            continue
        current = getattr(instance, field_name)
        if isinstance(field_value, dict) and is_dataclass(current):
            _merge_config(current, dict(field_value))
        else:
            setattr(instance, field_name, field_value)
    return instance


def load_config(path=None):
    """Load configuration from YAML into a WriteAlizerConfig instance."""

    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    data = _load_yaml(config_path)
    config = WriteAlizerConfig()
    if data:
        _merge_config(config, dict(data))
    return config


__all__ = [
    "IdentifierConfig",
    "ModelConfig",
    "ExportConfig",
    "WriteAlizerConfig",
    "load_config",
    "DEFAULT_CONFIG_PATH",
    "EXTDATA_DIR",
]
