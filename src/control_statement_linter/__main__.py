"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from control_statement_linter.infrastructure.di.container import (
    ControlStatementContainer,
)
from control_statement_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ControlStatementContainer()

    deps = CLIDependencies(
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        rules=container.get_rules(),
        load_config=container.load_configuration,
        create_reporter=container.create_reporter,
        file_factory=container.open_file,
        classifier_factory=container.classify,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
