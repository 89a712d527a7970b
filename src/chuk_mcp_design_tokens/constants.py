"""
Constants and enums for the design token system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class TokenType(str, Enum):
    """Closed set of token types understood by the generators."""

    COLOR = "color"
    DIMENSION = "dimension"
    STRING = "string"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"


class InputFormat(str, Enum):
    """
    Supported raw export schemas.

    FIGMA is the collection-based export (a list of single-key collections).
    TOKENS_STUDIO is the nested path-based export.
    """

    FIGMA = "figma"
    TOKENS_STUDIO = "tokens-studio"


class ModeName(str, Enum):
    """Modes every theme must define."""

    LIGHT = "light"
    DARK = "dark"


# Legacy alias rewritten during normalization
LEGACY_FLOAT_TYPE = "float"

# Types accepted by the raw export check (canonical types plus the legacy alias)
RAW_TOKEN_TYPES: frozenset[str] = frozenset(t.value for t in TokenType) | {LEGACY_FLOAT_TYPE}

REQUIRED_MODES: tuple[str, ...] = (ModeName.LIGHT.value, ModeName.DARK.value)

# Keys skipped at every depth of a nested export
SKIPPED_KEYS: frozenset[str] = frozenset({"$metadata", "$themes"})

# Record keys
TYPE_KEY = "$type"
VALUE_KEY = "$value"
COLLECTION_KEY = "$collectionName"
NESTED_TYPE_KEY = "type"
NESTED_VALUE_KEY = "value"
MODES_KEY = "modes"

# Output layout (relative to the output root)
FLATTENED_FILENAME = "tokens-flattened.json"
TAILWIND_DIR = "tailwind"
TAILWIND_APP_FILENAME = "app.css"
INDEX_JS_FILENAME = "index.js"
INDEX_DTS_FILENAME = "index.d.ts"

# Source layout
BRAND_FILE_SUFFIX = "-tokens"
SOURCE_EXTENSIONS: tuple[str, ...] = (".json", ".yaml", ".yml")

THEME_PREFIX = "theme-"


class ErrorMessages:
    """Standardized error messages."""

    BRAND_REQUIRED = "Brand name is required. Use --brand <brand-name> or set BRAND."
    INPUT_NOT_FOUND = "Token source not found: {path}"
    INVALID_JSON = "Invalid JSON syntax in {path}: {error}"
    INVALID_YAML = "Invalid YAML syntax in {path}: {error}"
    INVALID_ENCODING = "Token source {path} is not valid UTF-8: {error}"
    UNREADABLE_SOURCE = "Cannot read token source {path}: {error}"
    OUTSIDE_OUTPUT_DIR = "Artifact path {path} resolves outside the output directory {output_dir}"
    UNKNOWN_FORMAT = "Unknown input format: '{format}'. Expected one of: {choices}."
    NOT_A_SEQUENCE = "Collection-based export must be an array of collections"
    NOT_A_MAPPING = "Nested export must be an object"
    INVALID_COLLECTION = "Collection at index {index} must be an object with a single key"
    EMPTY_INPUT = "At least one theme must exist"
    MISSING_MODES = "Theme {theme} must have a 'modes' object"
    MISSING_MODE = "Theme {theme} must have both 'light' and 'dark' modes"
    INVALID_MODE = "Theme {theme}, mode {mode} must be an object"
    MISSING_TYPE_OR_VALUE = "Token {token} in {theme}/{mode} must have $type and $value properties"
    INVALID_VALUE = "Token {token} in {theme}/{mode} must have a scalar $value"
    UNKNOWN_TOKEN_TYPE = "Token {token} in {theme}/{mode} has unknown type: {type}"
    DANGLING_REFERENCE = "Token {token} in {theme}/{mode} references unknown token: {{{ref}}}"
    CIRCULAR_REFERENCE = "Circular reference in {theme}/{mode}: {cycle}"
    THEME_NAME_REQUIRED = "A theme name is required to assemble a nested export"


class SuccessMessages:
    """Standardized success messages."""

    TOKENS_VALID = "Token structure is valid ({themes} theme(s))"
    TOKENS_FLATTENED = "Flattened {format} tokens written to {path}"
    TOKENS_BUILT = "Built {artifacts} artifact(s) for {themes} theme(s) in {path}"
