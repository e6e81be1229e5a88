from .ast_expressions import Addition, BinaryExpression, Expression, Multiplication, Number
from .literals import format_decimal

_symbols: dict[type[BinaryExpression], str] = {
    Addition: "+",
    Multiplication: "*",
}

_precedence: dict[type[Expression], int] = {
    Addition: 1,
    Multiplication: 2,
    Number: 3,
}


def to_source(expression: Expression) -> str:
    """Render ``expression`` as source text that parses back to the same tree.

    Operators are left-associative, so a right operand of equal precedence
    keeps its parentheses.
    """
    parts: list[str] = []
    pending: list[Expression | str] = [expression]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        if isinstance(item, Number):
            parts.append(format_decimal(item.value))
            continue

        if isinstance(item, (Addition, Multiplication)):
            precedence = _precedence[type(item)]
            pending.extend(
                reversed(
                    [
                        *_operand(item.left, _precedence[type(item.left)] < precedence),
                        f" {_symbols[type(item)]} ",
                        *_operand(item.right, _precedence[type(item.right)] <= precedence),
                    ]
                )
            )
            continue

        raise TypeError(f"Unsupported expression type: {type(item).__name__}")

    return "".join(parts)


def _operand(expression: Expression, parenthesize: bool) -> list[Expression | str]:
    if parenthesize:
        return ["(", expression, ")"]
    return [expression]
