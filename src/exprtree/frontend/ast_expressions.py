from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Iterator

from .literals import format_decimal


class Expression:
    """Closed union of arithmetic expression nodes.

    Only the variants defined in this module may extend it, so every
    dispatch over ``Expression`` can be written exhaustively. Equality,
    hashing and ``repr`` walk the tree with explicit stacks, so they work on
    trees of any depth.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"cannot extend Expression with {cls.__qualname__}: "
                "the set of expression variants is closed"
            )

    def __new__(cls, *args: Any, **kwargs: Any) -> Expression:
        if cls is Expression:
            raise TypeError("Expression is abstract; build a Number, Addition or Multiplication")
        return super().__new__(cls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        if self is other:
            return True
        return all(
            mine == theirs
            for mine, theirs in zip_longest(self._shape(), other._shape())
        )

    def __hash__(self) -> int:
        return hash(tuple(self._shape()))

    def __repr__(self) -> str:
        parts: list[str] = []
        pending: list[Expression | str] = [self]

        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Number):
                parts.append(f"Number(value={format_decimal(item.value)})")
            elif isinstance(item, (Addition, Multiplication)):
                pending.extend(
                    reversed([f"{type(item).__name__}(left=", item.left, ", right=", item.right, ")"])
                )

        return "".join(parts)

    def __str__(self) -> str:
        from .printer import to_source

        return to_source(self)

    def _shape(self) -> Iterator[tuple[type[Expression], int | None]]:
        # Pre-order node kinds and literal values. Every variant has a fixed
        # arity, so the sequence identifies the tree.
        pending: list[Expression] = [self]
        while pending:
            node = pending.pop()
            if isinstance(node, Number):
                yield Number, node.value
            elif isinstance(node, (Addition, Multiplication)):
                yield type(node), None
                pending.append(node.right)
                pending.append(node.left)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Number(Expression):
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Number expects an int literal, got {type(self.value).__name__}"
            )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Addition(Expression):
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        _require_children(self, self.left, self.right)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Multiplication(Expression):
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        _require_children(self, self.left, self.right)


BinaryExpression = Addition | Multiplication


def _require_children(node: Expression, left: object, right: object) -> None:
    for side, child in (("left", left), ("right", right)):
        if not isinstance(child, Expression):
            raise TypeError(
                f"{type(node).__name__}.{side} must be an Expression, "
                f"got {type(child).__name__}"
            )
