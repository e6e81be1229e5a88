import operator
from typing import Callable

from ..frontend.ast_expressions import (
    Addition,
    BinaryExpression,
    Expression,
    Multiplication,
    Number,
)
from ..frontend.literals import format_decimal
from .core import RuntimeContext

_binary_ops: dict[type[BinaryExpression], tuple[str, Callable[[int, int], int]]] = {
    Addition: ("+", operator.add),
    Multiplication: ("*", operator.mul),
}


def eval_expr(expression: Expression, context: RuntimeContext) -> int:
    """Reduce ``expression`` with a post-order walk over an explicit stack.

    Left operands are reduced before right operands. Nothing on the tree is
    mutated, and tree depth is limited by memory only.
    """
    integers = context.integers
    values: list[int] = []
    pending: list[tuple[Expression, bool]] = [(expression, False)]

    while pending:
        node, operands_ready = pending.pop()

        if isinstance(node, Number):
            values.append(integers.fit(node.value))
            continue

        if isinstance(node, (Addition, Multiplication)):
            if not operands_ready:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
                continue

            right_value = values.pop()
            left_value = values.pop()
            symbol, apply = _binary_ops[type(node)]
            result = integers.fit(apply(left_value, right_value))
            if context.writer.debugging:
                context.writer.debugln(
                    f"[{format_decimal(left_value)} {symbol} "
                    f"{format_decimal(right_value)} => {format_decimal(result)}]"
                )
            values.append(result)
            continue

        raise TypeError(f"Unsupported expression type: {type(node).__name__}")

    [result] = values
    return result
