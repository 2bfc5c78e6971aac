"""json-to-scss: render JSON values as Sass map/list literals."""

__version__ = "0.1.0"

from .errors import ContractViolation, JsonToScssError, LoadError, OptionsError
from .model import (
    Dialect,
    VBool,
    VEmptyString,
    VList,
    VMap,
    VNull,
    VNumber,
    VString,
)
from .options import FormatOptions
from .normalizer import classify
from .serializer import RenderContext, to_sass
from .naming import default_prefix, variable_name
from .converter import ConversionReport, convert_file, convert_files

__all__ = [
    "__version__",
    "to_sass",
    "classify",
    "FormatOptions",
    "RenderContext",
    "Dialect",
    "VBool",
    "VEmptyString",
    "VList",
    "VMap",
    "VNull",
    "VNumber",
    "VString",
    "variable_name",
    "default_prefix",
    "convert_file",
    "convert_files",
    "ConversionReport",
    "JsonToScssError",
    "ContractViolation",
    "OptionsError",
    "LoadError",
]
