from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple, Union


class OperationType(str, Enum):
    RETAIN = "RETAIN"
    DELETE = "DELETE"
    INSERT = "INSERT"


@dataclass(frozen=True)
class Retain:
    count: int

    @property
    def type(self) -> OperationType:
        return OperationType.RETAIN

    @property
    def length(self) -> int:
        return self.count


@dataclass(frozen=True)
class Delete:
    count: int

    @property
    def type(self) -> OperationType:
        return OperationType.DELETE

    @property
    def length(self) -> int:
        return self.count


@dataclass(frozen=True)
class Insert:
    text: str

    @property
    def type(self) -> OperationType:
        return OperationType.INSERT

    @property
    def length(self) -> int:
        # Python str indexes code points, so len() is the character count.
        return len(self.text)


Primitive = Union[Retain, Delete, Insert]


class TextEdit:
    """
    An edit of a plain-text document: an ordered run of Retain / Delete / Insert
    primitives plus the length of the string it applies to (base_len) and the
    length of the string it produces (target_len).

    The builder methods keep the primitive list canonical:
    - zero-length primitives are dropped,
    - adjacent primitives of the same kind are merged,
    - an Insert always sits before a Delete at the same position.
    """

    __slots__ = ("_ops", "base_len", "target_len")

    def __init__(self):
        self._ops: List[Primitive] = []
        self.base_len = 0
        self.target_len = 0

    @classmethod
    def from_primitives(cls, primitives: Iterable[Primitive]) -> "TextEdit":
        edit = cls()
        for primitive in primitives:
            edit.add(primitive)
        return edit

    @property
    def ops(self) -> Tuple[Primitive, ...]:
        return tuple(self._ops)

    # --- Builder ---

    def add(self, primitive: Primitive) -> "TextEdit":
        match primitive:
            case Retain(count=count):
                return self.retain(count)
            case Delete(count=count):
                return self.delete(count)
            case Insert(text=text):
                return self.insert(text)
        raise TypeError(f"Not a primitive: {primitive!r}")

    def retain(self, n: int) -> "TextEdit":
        if n < 0:
            raise ValueError(f"retain count must be non-negative, got {n}")
        if n == 0:
            return self
        self.base_len += n
        self.target_len += n
        if self._ops and isinstance(self._ops[-1], Retain):
            self._ops[-1] = Retain(self._ops[-1].count + n)
        else:
            self._ops.append(Retain(n))
        return self

    def delete(self, n: int) -> "TextEdit":
        if n < 0:
            raise ValueError(f"delete count must be non-negative, got {n}")
        if n == 0:
            return self
        self.base_len += n
        if self._ops and isinstance(self._ops[-1], Delete):
            self._ops[-1] = Delete(self._ops[-1].count + n)
        else:
            self._ops.append(Delete(n))
        return self

    def insert(self, s: str) -> "TextEdit":
        if not s:
            return self
        self.target_len += len(s)
        ops = self._ops

        if ops and isinstance(ops[-1], Insert):
            ops[-1] = Insert(ops[-1].text + s)
        elif len(ops) >= 2 and isinstance(ops[-1], Delete) and isinstance(ops[-2], Insert):
            ops[-2] = Insert(ops[-2].text + s)
        elif ops and isinstance(ops[-1], Delete):
            # Insert goes in front of the trailing delete.
            ops.insert(len(ops) - 1, Insert(s))
        else:
            ops.append(Insert(s))
        return self

    # --- Queries ---

    def is_noop(self) -> bool:
        return not self._ops or (len(self._ops) == 1 and isinstance(self._ops[0], Retain))

    def __len__(self) -> int:
        return len(self._ops)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._ops)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TextEdit):
            return NotImplemented
        return self._ops == other._ops

    def __repr__(self) -> str:
        return f"TextEdit({self._ops!r}, base_len={self.base_len}, target_len={self.target_len})"
