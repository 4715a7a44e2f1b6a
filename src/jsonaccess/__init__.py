"""
jsonaccess: typed, total accessors for fields of parsed JSON documents.

Every accessor returns the caller's default instead of raising when a field
is absent or stored with the wrong kind. This package uses a src-layout.
Import the package as `jsonaccess`.

Passing an ``int`` default without an explicit tag reads the field as
``INT32``; pass ``tag=INT64`` / ``tag=UINT64`` for wider fields.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jsonaccess")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .coerce import extract_from_numeric_or_string
from .config import AccessorConfig, configured, get_config, set_config
from .diagnostics import (
    Diagnostic,
    capture_diagnostics,
    set_diagnostic_hook,
)
from .document import (
    FIELD_MISSING,
    JSONObject,
    JSONValue,
    load_document,
    try_load_document,
)
from .errors import (
    DocumentLoadError,
    InvalidTagError,
    JsonAccessError,
    UnsupportedCoercionTagError,
)
from .extract import extract
from .numbers import ParsedNumber, parse_float, parse_int
from .runtime import configure_logging, get_logger
from .tags import (
    BOOL,
    CHAR,
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    SIGNED,
    STRING,
    UINT32,
    UINT64,
    UNSIGNED,
    NumericTag,
    TypeTag,
    infer_tag,
    tag_from_name,
)
from .validate import is_valid, is_valid_array, is_valid_object

__all__ = [
    "__version__",
    "BOOL",
    "CHAR",
    "FIELD_MISSING",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "SIGNED",
    "STRING",
    "UINT32",
    "UINT64",
    "UNSIGNED",
    "AccessorConfig",
    "Diagnostic",
    "DocumentLoadError",
    "InvalidTagError",
    "JSONObject",
    "JSONValue",
    "JsonAccessError",
    "NumericTag",
    "ParsedNumber",
    "TypeTag",
    "UnsupportedCoercionTagError",
    "capture_diagnostics",
    "configure_logging",
    "configured",
    "extract",
    "extract_from_numeric_or_string",
    "get_config",
    "get_logger",
    "infer_tag",
    "is_valid",
    "is_valid_array",
    "is_valid_object",
    "load_document",
    "parse_float",
    "parse_int",
    "set_config",
    "set_diagnostic_hook",
    "tag_from_name",
    "try_load_document",
]
