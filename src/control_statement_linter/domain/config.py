"""Configuration for linter settings. Immutable value objects created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from control_statement_linter.domain.constants import (
    DEFAULT_REPORTER,
    KNOWN_CONFIG_KEYS,
    SUPPORTED_REPORTERS,
)
from control_statement_linter.domain.entities import Severity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeverityConfiguration:
    """Severity attached verbatim to every violation of one rule."""

    severity: Severity = Severity.WARNING

    @classmethod
    def from_value(cls, value: object) -> SeverityConfiguration:
        """
        Build from a config value.

        Accepts a severity name ("warning", "error") or a mapping with a
        "severity" key. Raises ValueError for anything else.
        """
        if isinstance(value, dict):
            value = value.get("severity", Severity.WARNING.value)
        if isinstance(value, Severity):
            return cls(value)
        if isinstance(value, str):
            try:
                return cls(Severity(value.strip().lower()))
            except ValueError:
                pass
        raise ValueError(
            f"Invalid severity {value!r}; expected one of "
            f"{', '.join(s.value for s in Severity)}"
        )


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the parsed .swiftlint.yml mapping. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader and constructs
    ConfigurationLoader(config_dict) at the composition root.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values. Raises ValueError on bad values."""
        for key in ("disabled_rules", "included", "excluded"):
            raw = config.get(key, [])
            if raw is not None and not isinstance(raw, list):
                raise ValueError(f"Configuration key '{key}' must be a list")
        reporter = config.get("reporter", DEFAULT_REPORTER)
        if reporter not in SUPPORTED_REPORTERS:
            raise ValueError(
                f"Unknown reporter {reporter!r}; expected one of "
                f"{', '.join(SUPPORTED_REPORTERS)}"
            )
        for key, value in config.items():
            if key in KNOWN_CONFIG_KEYS:
                continue
            if isinstance(value, (str, dict)):
                # Rule-specific entry: a bad severity fails here, at load time.
                SeverityConfiguration.from_value(value)
                continue
            logger.warning("Configuration Warning: ignoring unknown key '%s'", key)

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return dict(self._config)

    @property
    def disabled_rules(self) -> list[str]:
        return self._string_list("disabled_rules")

    @property
    def included(self) -> list[str]:
        """Path prefixes to lint. Empty means everything."""
        return self._string_list("included")

    @property
    def excluded(self) -> list[str]:
        """Path prefixes never linted."""
        return self._string_list("excluded")

    @property
    def reporter(self) -> str:
        return str(self._config.get("reporter", DEFAULT_REPORTER))

    def is_rule_enabled(self, rule_id: str) -> bool:
        return rule_id not in self.disabled_rules

    def severity_configuration(self, rule_id: str) -> SeverityConfiguration:
        """Severity for rule_id; WARNING when the rule has no entry."""
        if rule_id not in self._config:
            return SeverityConfiguration()
        return SeverityConfiguration.from_value(self._config[rule_id])

    def _string_list(self, key: str) -> list[str]:
        raw = self._config.get(key) or []
        if isinstance(raw, list):
            return [str(x) for x in raw]
        return []
