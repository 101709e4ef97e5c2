from typing import Iterator, Optional, Tuple

import structlog

from textot.errors import ExhaustedEditError, LengthMismatchError
from textot.models import Delete, Insert, Primitive, Retain, TextEdit

logger = structlog.get_logger(__name__)


def _check_length(actual: int, expected: int, message: str):
    if actual != expected:
        logger.error(f"{message} (expected {expected}, got {actual})")
        raise LengthMismatchError(f"{message}: expected {expected}, got {actual}", expected=expected, actual=actual)


def _exhausted(message: str):
    logger.error(message)
    raise ExhaustedEditError(message)


def _consume(head: Primitive, n: int, rest: Iterator[Primitive]) -> Optional[Primitive]:
    """
    Eats the first n characters of the current head.
    Returns the leftover primitive, or the next one from `rest` once the head is used up.
    """
    if head.length > n:
        match head:
            case Retain(count=count):
                return Retain(count - n)
            case Delete(count=count):
                return Delete(count - n)
            case Insert(text=text):
                return Insert(text[n:])
    return next(rest, None)


def apply_edit(edit: TextEdit, text: str) -> str:
    """
    Applies the edit to `text` and returns the new string.
    `text` must be exactly edit.base_len characters long.
    """
    logger.debug(f"Applying edit with {len(edit)} primitives to {len(text)} characters")
    _check_length(len(text), edit.base_len, "Cannot apply edit: string length does not match base length")

    parts = []
    cursor = 0
    for op in edit:
        match op:
            case Retain(count=count):
                parts.append(text[cursor : cursor + count])
                cursor += count
            case Delete(count=count):
                cursor += count
            case Insert(text=inserted):
                parts.append(inserted)
    return "".join(parts)


def invert_edit(edit: TextEdit, text: str) -> TextEdit:
    """
    Builds the edit that undoes `edit`, given the string it was applied to.

    apply_edit(invert_edit(e, s), apply_edit(e, s)) == s
    """
    logger.debug(f"Inverting edit with {len(edit)} primitives")
    _check_length(len(text), edit.base_len, "Cannot invert edit: string length does not match base length")

    inverse = TextEdit()
    cursor = 0
    for op in edit:
        match op:
            case Retain(count=count):
                inverse.retain(count)
                cursor += count
            case Insert(text=inserted):
                inverse.delete(len(inserted))
            case Delete(count=count):
                inverse.insert(text[cursor : cursor + count])
                cursor += count
    return inverse


def compose(a: TextEdit, b: TextEdit) -> TextEdit:
    """
    Merges two consecutive edits into one, so that
    apply_edit(compose(a, b), s) == apply_edit(b, apply_edit(a, s)).
    """
    logger.debug(f"Composing edits with {len(a)} and {len(b)} primitives")
    _check_length(
        b.base_len,
        a.target_len,
        "Cannot compose edits: base length of the second edit must equal target length of the first",
    )

    composed = TextEdit()
    ops1 = iter(a)
    ops2 = iter(b)
    op1 = next(ops1, None)
    op2 = next(ops2, None)

    while True:
        match op1, op2:
            case None, None:
                break
            # Deletes of `a` touch characters `b` never sees.
            case Delete(count=count), _:
                composed.delete(count)
                op1 = next(ops1, None)
                continue
            # Inserts of `b` were never produced by `a`.
            case _, Insert(text=text):
                composed.insert(text)
                op2 = next(ops2, None)
                continue
            case None, _:
                _exhausted("Cannot compose edits: first edit is too short")
            case _, None:
                _exhausted("Cannot compose edits: second edit is too short")

        m = min(op1.length, op2.length)
        match op1, op2:
            case Retain(), Retain():
                composed.retain(m)
            case Insert(), Delete():
                pass
            case Insert(text=text), Retain():
                composed.insert(text[:m])
            case Retain(), Delete():
                composed.delete(m)
        op1 = _consume(op1, m, ops1)
        op2 = _consume(op2, m, ops2)

    return composed


def transform(a: TextEdit, b: TextEdit) -> Tuple[TextEdit, TextEdit]:
    """
    Transforms two concurrent edits of the same string into (a', b') such that
    compose(a, b') == compose(b, a').

    When both edits insert at the same position, the insert of `a` ends up first.
    """
    logger.debug(f"Transforming edits with {len(a)} and {len(b)} primitives")
    _check_length(b.base_len, a.base_len, "Cannot transform edits: both edits must have the same base length")

    a_prime = TextEdit()
    b_prime = TextEdit()
    ops1 = iter(a)
    ops2 = iter(b)
    op1 = next(ops1, None)
    op2 = next(ops2, None)

    while True:
        match op1, op2:
            case None, None:
                break
            # Must be checked before the insert of `b`: left wins ties.
            case Insert(text=text), _:
                a_prime.insert(text)
                b_prime.retain(len(text))
                op1 = next(ops1, None)
                continue
            case _, Insert(text=text):
                a_prime.retain(len(text))
                b_prime.insert(text)
                op2 = next(ops2, None)
                continue
            case None, _:
                _exhausted("Cannot transform edits: first edit is too short")
            case _, None:
                _exhausted("Cannot transform edits: second edit is too short")

        m = min(op1.length, op2.length)
        match op1, op2:
            case Retain(), Retain():
                a_prime.retain(m)
                b_prime.retain(m)
            case Delete(), Delete():
                # Both sides already removed these characters.
                pass
            case Delete(), Retain():
                a_prime.delete(m)
            case Retain(), Delete():
                b_prime.delete(m)
        op1 = _consume(op1, m, ops1)
        op2 = _consume(op2, m, ops2)

    return a_prime, b_prime
