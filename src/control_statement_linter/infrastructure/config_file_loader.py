"""Load .swiftlint.yml. Infrastructure I/O only."""

from pathlib import Path

import yaml

from control_statement_linter.domain.constants import CONFIG_FILE_NAME


class ConfigFileLoader:
    """
    Loads config from .swiftlint.yml. Malformed YAML (yaml.YAMLError) propagates.
    """

    @staticmethod
    def load_config_file(path: str | Path) -> dict[str, object]:
        """Parse one YAML file. An empty file yields {}."""
        with Path(path).open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: top level of the configuration must be a mapping")
        return data

    @staticmethod
    def load_config_from_fs(start: str | Path | None = None) -> dict[str, object]:
        """Walk up from start (default: cwd) to / and load the first .swiftlint.yml found."""
        current_path = Path(start) if start is not None else Path.cwd()
        current_path = current_path.resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / CONFIG_FILE_NAME
            if config_file.is_file():
                return ConfigFileLoader.load_config_file(config_file)
        return {}
