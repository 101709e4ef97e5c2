from importlib.metadata import PackageNotFoundError, version

from textot.diff import describe_edit, edit_from_text
from textot.engine import apply_edit, compose, invert_edit, transform
from textot.errors import EditError, ExhaustedEditError, LengthMismatchError, WireFormatError
from textot.logs import configure_logging
from textot.models import Delete, Insert, OperationType, Primitive, Retain, TextEdit
from textot.wire import from_json, from_wire, to_json, to_wire

try:
    __version__ = version("textot")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source/dev)
    __version__ = "0.0.0-dev"

__all__ = [
    "TextEdit",
    "Retain",
    "Delete",
    "Insert",
    "Primitive",
    "OperationType",
    "apply_edit",
    "invert_edit",
    "compose",
    "transform",
    "edit_from_text",
    "describe_edit",
    "to_wire",
    "from_wire",
    "to_json",
    "from_json",
    "EditError",
    "LengthMismatchError",
    "ExhaustedEditError",
    "WireFormatError",
    "configure_logging",
    "__version__",
]
