"""Edit operation types shared by the distance metrics."""

from __future__ import annotations

import enum
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar, overload

__all__ = [
    "EditType",
    "EditOp",
    "Opcode",
    "StringAffix",
    "LevenshteinWeightTable",
    "ScoreAlignment",
    "Editops",
    "Opcodes",
]


class EditType(enum.IntEnum):
    """Kind of an edit operation."""

    NONE = 0
    REPLACE = 1
    INSERT = 2
    DELETE = 3


@dataclass(frozen=True)
class EditOp:
    """A single edit operation applied to the source sequence.

    REPLACE: replace source[src_pos] with destination[dest_pos]
    INSERT:  insert destination[dest_pos] at source position src_pos
    DELETE:  delete source[src_pos]
    """

    type: EditType = EditType.NONE
    src_pos: int = 0
    dest_pos: int = 0


@dataclass(frozen=True)
class Opcode:
    """A block of edit operations.

    NONE:    source[src_begin:src_end] == destination[dest_begin:dest_end]
    REPLACE: source[src_begin:src_end] is replaced by destination[dest_begin:dest_end]
    INSERT:  destination[dest_begin:dest_end] is inserted at source[src_begin]
    DELETE:  source[src_begin:src_end] is deleted
    """

    type: EditType = EditType.NONE
    src_begin: int = 0
    src_end: int = 0
    dest_begin: int = 0
    dest_end: int = 0


@dataclass(frozen=True)
class StringAffix:
    """Lengths of a common prefix and suffix."""

    prefix_len: int
    suffix_len: int


@dataclass(frozen=True)
class LevenshteinWeightTable:
    """Costs of insertion, deletion and substitution."""

    insert_cost: int = 1
    delete_cost: int = 1
    replace_cost: int = 1


ScoreT = TypeVar("ScoreT")


@dataclass(frozen=True)
class ScoreAlignment(Generic[ScoreT]):
    """A score together with the aligned parts of source and destination."""

    score: ScoreT
    src_start: int = 0
    src_end: int = 0
    dest_start: int = 0
    dest_end: int = 0


def _check_step(step: int) -> None:
    if step == 0:
        raise ValueError("slice step cannot be zero")
    if step < 0:
        raise ValueError("step sizes below 0 lead to an invalid order of editops")


def _assemble(source: Sequence[Any], items: list[Any]) -> Any:
    if isinstance(source, str):
        return "".join(items)
    if isinstance(source, (bytes, bytearray)):
        return bytes(items)
    return items


OpT = TypeVar("OpT")


class _OperationList(MutableSequence, Generic[OpT]):
    """List of operations that also records the lengths of both sequences."""

    def __init__(self, ops: Iterable[OpT] = (), src_len: int = 0, dest_len: int = 0) -> None:
        self._ops: list[OpT] = list(ops)
        self.src_len = src_len
        self.dest_len = dest_len

    def _derive(self, ops: Iterable[OpT]):
        return type(self)(ops, self.src_len, self.dest_len)

    @overload
    def __getitem__(self, index: int) -> OpT: ...

    @overload
    def __getitem__(self, index: slice) -> Any: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._ops[index])
        return self._ops[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._ops[index] = list(value)
        else:
            self._ops[index] = value

    def __delitem__(self, index) -> None:
        del self._ops[index]

    def __len__(self) -> int:
        return len(self._ops)

    def insert(self, index: int, value: OpT) -> None:
        self._ops.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return (
            self.src_len == other.src_len
            and self.dest_len == other.dest_len
            and self._ops == other._ops
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._ops!r}, "
            f"src_len={self.src_len}, dest_len={self.dest_len})"
        )


class Editops(_OperationList[EditOp]):
    """Edit operations that turn a source sequence into a destination sequence."""

    def __init__(self, ops: Iterable[EditOp] = (), src_len: int = 0, dest_len: int = 0) -> None:
        super().__init__(ops, src_len, dest_len)

    def slice(self, start: int, stop: int, step: int = 1) -> Editops:
        """Return the operations in ``[start:stop:step]``; ``step`` must be positive."""
        _check_step(step)
        return Editops(self._ops[start:stop:step], self.src_len, self.dest_len)

    def remove_slice(self, start: int, stop: int, step: int = 1) -> None:
        """Delete the operations in ``[start:stop:step]`` in place."""
        _check_step(step)
        del self._ops[start:stop:step]

    def reverse(self) -> Editops:
        """Return a copy with the operations in reverse order."""
        return Editops(reversed(self._ops), self.src_len, self.dest_len)

    def inverse(self) -> Editops:
        """Return the operations that turn the destination back into the source."""
        swapped = {EditType.DELETE: EditType.INSERT, EditType.INSERT: EditType.DELETE}
        return Editops(
            (
                EditOp(swapped.get(op.type, op.type), op.dest_pos, op.src_pos)
                for op in self._ops
            ),
            self.dest_len,
            self.src_len,
        )

    def remove_subsequence(self, subsequence: Editops) -> Editops:
        """Return the operations left after removing ``subsequence``.

        Source positions of the remaining operations are shifted to account
        for the insertions and deletions that were removed.
        """
        if len(subsequence) > len(self):
            raise ValueError("subsequence is not a subsequence")

        result: list[EditOp] = []
        offset = 0
        remaining = iter(self._ops)
        for sop in subsequence:
            for op in remaining:
                if op == sop:
                    break
                result.append(replace(op, src_pos=op.src_pos + offset))
            else:
                raise ValueError("subsequence is not a subsequence")

            if sop.type == EditType.INSERT:
                offset += 1
            elif sop.type == EditType.DELETE:
                offset -= 1

        result.extend(replace(op, src_pos=op.src_pos + offset) for op in remaining)
        return Editops(result, self.src_len, self.dest_len)

    def as_opcodes(self) -> Opcodes:
        """Convert to blocks of operations, filling gaps with NONE blocks."""
        ops = self._ops
        result: list[Opcode] = []
        src_pos = dest_pos = 0
        i = 0
        while i < len(ops):
            op = ops[i]
            if src_pos < op.src_pos or dest_pos < op.dest_pos:
                result.append(Opcode(EditType.NONE, src_pos, op.src_pos, dest_pos, op.dest_pos))
                src_pos, dest_pos = op.src_pos, op.dest_pos

            src_begin, dest_begin = src_pos, dest_pos
            kind = op.type
            while True:
                if kind in (EditType.REPLACE, EditType.DELETE):
                    src_pos += 1
                if kind in (EditType.REPLACE, EditType.INSERT):
                    dest_pos += 1
                i += 1
                if not (
                    i < len(ops)
                    and ops[i].type == kind
                    and ops[i].src_pos == src_pos
                    and ops[i].dest_pos == dest_pos
                ):
                    break
            result.append(Opcode(kind, src_begin, src_pos, dest_begin, dest_pos))

        if src_pos < self.src_len or dest_pos < self.dest_len:
            result.append(Opcode(EditType.NONE, src_pos, self.src_len, dest_pos, self.dest_len))
        return Opcodes(result, self.src_len, self.dest_len)

    def apply(self, source: Sequence[Any], destination: Sequence[Any]) -> Any:
        """Apply the operations to ``source``, taking new elements from ``destination``."""
        result: list[Any] = []
        src_pos = 0
        for op in self._ops:
            if src_pos < op.src_pos:
                result.extend(source[src_pos:op.src_pos])
                src_pos = op.src_pos
            if op.type == EditType.REPLACE:
                result.append(destination[op.dest_pos])
                src_pos += 1
            elif op.type == EditType.INSERT:
                result.append(destination[op.dest_pos])
            elif op.type == EditType.DELETE:
                src_pos += 1
        result.extend(source[src_pos:])
        return _assemble(source, result)


class Opcodes(_OperationList[Opcode]):
    """Blocks of edit operations covering both sequences completely."""

    def __init__(self, ops: Iterable[Opcode] = (), src_len: int = 0, dest_len: int = 0) -> None:
        super().__init__(ops, src_len, dest_len)

    def slice(self, start: int, stop: int, step: int = 1) -> Opcodes:
        """Return the blocks in ``[start:stop:step]``; ``step`` must be positive."""
        _check_step(step)
        return Opcodes(self._ops[start:stop:step], self.src_len, self.dest_len)

    def reverse(self) -> Opcodes:
        """Return a copy with the blocks in reverse order."""
        return Opcodes(reversed(self._ops), self.src_len, self.dest_len)

    def inverse(self) -> Opcodes:
        """Return the blocks that turn the destination back into the source."""
        swapped = {EditType.DELETE: EditType.INSERT, EditType.INSERT: EditType.DELETE}
        return Opcodes(
            (
                Opcode(
                    swapped.get(op.type, op.type),
                    op.dest_begin,
                    op.dest_end,
                    op.src_begin,
                    op.src_end,
                )
                for op in self._ops
            ),
            self.dest_len,
            self.src_len,
        )

    def as_editops(self) -> Editops:
        """Expand the blocks into single edit operations, dropping NONE blocks."""
        result: list[EditOp] = []
        for op in self._ops:
            if op.type == EditType.REPLACE:
                result.extend(
                    EditOp(EditType.REPLACE, op.src_begin + j, op.dest_begin + j)
                    for j in range(op.src_end - op.src_begin)
                )
            elif op.type == EditType.INSERT:
                result.extend(
                    EditOp(EditType.INSERT, op.src_begin, op.dest_begin + j)
                    for j in range(op.dest_end - op.dest_begin)
                )
            elif op.type == EditType.DELETE:
                result.extend(
                    EditOp(EditType.DELETE, op.src_begin + j, op.dest_begin)
                    for j in range(op.src_end - op.src_begin)
                )
        return Editops(result, self.src_len, self.dest_len)

    def apply(self, source: Sequence[Any], destination: Sequence[Any]) -> Any:
        """Build the result of applying the blocks to ``source``."""
        result: list[Any] = []
        for op in self._ops:
            if op.type == EditType.NONE:
                result.extend(source[op.src_begin:op.src_end])
            elif op.type in (EditType.REPLACE, EditType.INSERT):
                result.extend(destination[op.dest_begin:op.dest_end])
        return _assemble(source, result)