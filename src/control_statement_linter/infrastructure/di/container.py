from typing import TYPE_CHECKING, Any, cast

import yaml

from control_statement_linter.domain.config import ConfigurationLoader
from control_statement_linter.domain.rules.control_statement import (
    ControlStatementRule,
)
from control_statement_linter.infrastructure.config_file_loader import ConfigFileLoader
from control_statement_linter.infrastructure.gateways.filesystem_gateway import (
    FileSystemGateway,
)
from control_statement_linter.infrastructure.gateways.swift_file import SwiftFile
from control_statement_linter.infrastructure.gateways.syntax_classifier import (
    SwiftSyntaxClassifier,
)
from control_statement_linter.infrastructure.reporters import ReporterFactory
from control_statement_linter.interface.telemetry import ConsoleTelemetry

if TYPE_CHECKING:
    from control_statement_linter.domain.protocols import (
        FileSystemProtocol,
        SourceFileProtocol,
        SyntaxClassifierProtocol,
        TelemetryPort,
    )
    from control_statement_linter.domain.rules import Correctable
    from control_statement_linter.interface.reporters import ViolationReporter


class ControlStatementContainer:
    """Dependency Injection Container for the control statement linter."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton("TelemetryPort", ConsoleTelemetry("control-statement"))
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("Rules", [ControlStatementRule()])

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_rules(self) -> "list[Correctable]":
        """Return every registered rule."""
        return cast("list[Correctable]", self.get("Rules"))

    @staticmethod
    def load_configuration(path: str | None = None) -> ConfigurationLoader:
        """Build the immutable configuration from an explicit file or the nearest .swiftlint.yml."""
        try:
            if path is not None:
                config_dict = ConfigFileLoader.load_config_file(path)
            else:
                config_dict = ConfigFileLoader.load_config_from_fs()
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML configuration: {e}") from e
        return ConfigurationLoader(config_dict)

    @staticmethod
    def create_reporter(identifier: str) -> "ViolationReporter":
        return ReporterFactory.create(identifier)

    @staticmethod
    def open_file(path: str) -> "SourceFileProtocol":
        return SwiftFile.from_path(path)

    @staticmethod
    def classify(contents: str) -> "SyntaxClassifierProtocol":
        return SwiftSyntaxClassifier(contents)
