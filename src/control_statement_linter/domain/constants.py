CONFIG_FILE_NAME = ".swiftlint.yml"

COMMAND_PREFIX = "swiftlint:"

DEFAULT_REPORTER = "xcode"
SUPPORTED_REPORTERS = ("xcode", "json")

KNOWN_CONFIG_KEYS = frozenset({
    "disabled_rules",
    "included",
    "excluded",
    "reporter",
})

# Marks the expected violation offset inside a triggering example.
VIOLATION_MARKER = "↓"

SWIFT_FILE_SUFFIX = ".swift"
