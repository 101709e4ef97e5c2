"""
JSON wire form of a TextEdit.

An edit travels as a flat JSON array, one element per primitive:
    Retain(n)  ->  n      (positive integer)
    Delete(n)  ->  -n     (negative integer)
    Insert(s)  ->  "s"    (string)

Decoding goes through the builder, so non-canonical arrays (zeros, repeated
kinds, delete-before-insert) come back in canonical form.
"""

from typing import Any, List, Union

import structlog
from pydantic import StrictInt, StrictStr, TypeAdapter, ValidationError

from textot.errors import WireFormatError
from textot.models import Delete, Insert, Retain, TextEdit

logger = structlog.get_logger(__name__)

WireItem = Union[StrictInt, StrictStr]

_wire_adapter = TypeAdapter(List[WireItem])


def to_wire(edit: TextEdit) -> List[Union[int, str]]:
    items: List[Union[int, str]] = []
    for op in edit:
        match op:
            case Retain(count=count):
                items.append(count)
            case Delete(count=count):
                items.append(-count)
            case Insert(text=text):
                items.append(text)
    return items


def from_wire(items: Any) -> TextEdit:
    try:
        validated = _wire_adapter.validate_python(items)
    except ValidationError as e:
        logger.error(f"Rejected wire payload: {e.error_count()} invalid element(s)")
        raise WireFormatError(f"Invalid edit payload: {e}") from e
    return _build(validated)


def to_json(edit: TextEdit) -> str:
    return _wire_adapter.dump_json(to_wire(edit)).decode("utf-8")


def from_json(data: Union[str, bytes]) -> TextEdit:
    try:
        validated = _wire_adapter.validate_json(data)
    except ValidationError as e:
        logger.error(f"Rejected JSON payload: {e.error_count()} invalid element(s)")
        raise WireFormatError(f"Invalid edit payload: {e}") from e
    return _build(validated)


def _build(items: List[Union[int, str]]) -> TextEdit:
    edit = TextEdit()
    for item in items:
        if isinstance(item, str):
            edit.insert(item)
        elif item >= 0:
            edit.retain(item)
        else:
            edit.delete(-item)
    return edit
