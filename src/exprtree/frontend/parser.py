from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Transformer, Tree

from .ast_expressions import Addition, Expression, Multiplication, Number
from .literals import parse_decimal


class AstTransformer(Transformer[Token, Expression]):
    def add(self, children: list[object]) -> Addition:
        [left, right] = children
        return Addition(self._as_expression(left), self._as_expression(right))

    def mul(self, children: list[object]) -> Multiplication:
        [left, right] = children
        return Multiplication(self._as_expression(left), self._as_expression(right))

    def number(self, children: list[object]) -> Number:
        [number] = children
        assert isinstance(number, Token)
        return Number(parse_decimal(str(number)))

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _load_grammar_text() -> str:
    grammar_file = files("exprtree.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


@lru_cache(maxsize=1)
def get_expression_parser() -> Lark:
    # Applying the transformer on each reduction keeps tree building
    # iterative, unlike Transformer.transform on a finished tree.
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr", transformer=AstTransformer())


def parse_tree(source: str) -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[Token], tree)


def parse_expression(source: str) -> Expression:
    parser: Any = get_expression_parser()
    expression = parser.parse(source)
    assert isinstance(expression, Expression)
    return expression
