"""Custom exceptions for the font metadata access layer."""

from typing import Any


class GFMetadataError(Exception):
    """Base exception for all metadata errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(GFMetadataError):
    """Exception raised when records fail validation."""


class DuplicateKeyError(GFMetadataError):
    """Exception raised when two records share a unique key."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"Duplicate {kind} key: {key}", details={"kind": kind, "key": key})
        self.kind = kind
        self.key = key


class NotFoundError(GFMetadataError, LookupError):
    """Exception raised when a query key does not exist."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"No such {kind}: {key}", details={"kind": kind, "key": key})
        self.kind = kind
        self.key = key


class ParseError(GFMetadataError):
    """Exception raised when metadata text cannot be parsed."""


class ConfigurationError(GFMetadataError):
    """Exception raised for configuration errors."""


class RecordSchemaError(ValidationError):
    """Exception raised when raw record data does not match the record schema."""

    def __init__(self, error: str):
        super().__init__(f"Invalid record data: {error}")


class DanglingReferenceError(ValidationError):
    """Exception raised when a record references a key that was not loaded."""

    def __init__(self, source_kind: str, source: str, target_kind: str, target: str):
        super().__init__(
            f"{source_kind} {source!r} references unknown {target_kind} {target!r}",
            details={
                "source_kind": source_kind,
                "source": source,
                "target_kind": target_kind,
                "target": target,
            },
        )


class InvalidCategoryError(ValidationError):
    """Exception raised for category values outside the known set."""

    def __init__(self, value: str):
        super().__init__(f"Unknown family category: {value}")


class AxisRangeError(ValidationError):
    """Exception raised when a family axis exceeds the registered axis bounds."""

    def __init__(self, family: str, tag: str, low: float, high: float):
        super().__init__(
            f"Family {family!r} axis {tag} range {low}..{high} is outside the registered bounds"
        )


class TagParseError(ParseError):
    """Exception raised for unparseable tag CSV lines."""


class ProtoParseError(ParseError):
    """Exception raised when a text-format protobuf fails to parse."""

    def __init__(self, source: str, error: str):
        super().__init__(f"Unable to parse {source}: {error}", details={"source": source})


class DecoderNotAvailableError(ImportError):
    """Exception raised when generated protobuf classes are not installed."""

    def __init__(self, module: str, package: str):
        super().__init__(f"{module} not available. Install with: pip install {package}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class UnknownCategoryValueError(ValueError):
    """Exception raised when a category string names no known category."""

    def __init__(self, value: str):
        super().__init__(f"Unknown family category: {value}")


class InvalidAxisRangeError(ValueError):
    """Exception raised when an axis maximum is below its minimum."""

    def __init__(self, low: float, high: float):
        super().__init__(f"Axis max_value {high} must not be below min_value {low}")


class AxisDefaultOutOfRangeError(ValueError):
    """Exception raised when an axis default lies outside its bounds."""

    def __init__(self, default: float, low: float, high: float):
        super().__init__(f"Axis default_value {default} must lie within {low}..{high}")


class InvalidFamilyFilterError(ValueError):
    """Exception raised for family filters that are not valid regular expressions."""

    def __init__(self, pattern: str, error: str):
        super().__init__(f"Invalid family filter {pattern!r}: {error}")


class InvalidLogLevelError(ValueError):
    """Exception raised for unknown log level names."""

    def __init__(self, level: str):
        super().__init__(f"Unknown log level: {level}")
