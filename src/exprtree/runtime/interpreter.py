import sys
from typing import TextIO, overload

from lark.exceptions import LarkError

from ..frontend.ast_expressions import Expression
from ..frontend.parser import parse_expression
from .core import RuntimeContext
from .expression_evaluator import eval_expr


def evaluate(expression: Expression, context: RuntimeContext | None = None) -> int:
    context = context or RuntimeContext()
    return eval_expr(expression, context)


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> int | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        expression = parse_expression(source)
    except (LarkError, TypeError, ValueError) as error:
        print(f"Syntax error: {error}", file=stream)
        return None

    try:
        return evaluate(expression, context)
    except ArithmeticError as error:
        print(f"Runtime error: {error}", file=stream)
        return None


@overload
def run(
    expression_or_source: Expression, context: RuntimeContext | None = None
) -> int: ...


@overload
def run(
    expression_or_source: str, context: RuntimeContext | None = None
) -> int: ...


def run(
    expression_or_source: Expression | str, context: RuntimeContext | None = None
) -> int:
    if isinstance(expression_or_source, str):
        expression = parse_expression(expression_or_source)
    else:
        expression = expression_or_source

    return evaluate(expression, context)
