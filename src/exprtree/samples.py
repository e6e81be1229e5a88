from .frontend.ast_expressions import Addition, Expression, Multiplication, Number


def build_sum() -> Addition:
    # 4 + 5
    return Addition(Number(4), Number(5))


def build_product() -> Multiplication:
    # (4 + 5) * 2
    return Multiplication(build_sum(), Number(2))


def build_addition_chain(depth: int) -> Expression:
    """Build ``Addition(Number(1), Addition(Number(1), ...))`` ``depth`` levels deep.

    The innermost node is ``Number(1)``, so the chain evaluates to ``depth``.
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")

    expression: Expression = Number(1)
    for _ in range(depth - 1):
        expression = Addition(Number(1), expression)
    return expression


def product_source() -> str:
    return "(4 + 5) * 2"
