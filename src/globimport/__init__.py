"""globimport - expand wildcard imports into per-file imports."""

__version__ = "0.1.0"

from globimport.errors import ErrorKind, GlobImportError
from globimport.models import Module
from globimport.transform import GlobImporter, TransformResult, process_transform, transform_module

__all__ = [
    "ErrorKind",
    "GlobImportError",
    "GlobImporter",
    "Module",
    "TransformResult",
    "process_transform",
    "transform_module",
]
