from .frontend.ast_expressions import Addition, Expression, Multiplication, Number
from .frontend.parser import parse_expression, parse_tree
from .frontend.printer import to_source
from .runtime.core import IntegerOverflowError, IntegerPolicy, RuntimeContext
from .runtime.interpreter import evaluate, run, run_for_cli
from .writer import TraceWriter

__all__ = [
    "Addition",
    "Expression",
    "IntegerOverflowError",
    "IntegerPolicy",
    "Multiplication",
    "Number",
    "RuntimeContext",
    "TraceWriter",
    "evaluate",
    "parse_expression",
    "parse_tree",
    "run",
    "run_for_cli",
    "to_source",
]
