import dataclasses

import pytest

from exprtree.frontend.ast_expressions import Addition, Expression, Multiplication, Number
from exprtree.samples import build_addition_chain


# ===== Construction =====
def test_nodes_are_built_bottom_up() -> None:
    four = Number(4)
    five = Number(5)
    total = Addition(four, five)
    product = Multiplication(total, Number(2))

    assert product.left is total
    assert total.left is four
    assert total.right is five


def test_nodes_compare_structurally() -> None:
    assert Addition(Number(1), Number(2)) == Addition(Number(1), Number(2))
    assert Addition(Number(1), Number(2)) != Multiplication(Number(1), Number(2))
    assert hash(Number(3)) == hash(Number(3))


def test_nodes_are_immutable() -> None:
    node = Addition(Number(1), Number(2))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.left = Number(3)  # type: ignore[misc]


# ===== Construction Checks =====
@pytest.mark.parametrize("value", [1.5, "4", None, True])
def test_number_rejects_non_integer_literals(value: object) -> None:
    with pytest.raises(TypeError, match=r"(?i)int"):
        Number(value)  # type: ignore[arg-type]


def test_binary_nodes_reject_non_expression_children() -> None:
    with pytest.raises(TypeError, match=r"Addition\.right"):
        Addition(Number(1), 2)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match=r"Multiplication\.left"):
        Multiplication(None, Number(2))  # type: ignore[arg-type]


def test_number_accepts_big_and_negative_integers() -> None:
    assert Number(-7).value == -7
    assert Number(10**40).value == 10**40


# ===== Closed Union =====
def test_expression_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match=r"(?i)abstract"):
        Expression()


def test_expression_cannot_be_extended_outside_its_module() -> None:
    with pytest.raises(TypeError, match=r"(?i)closed"):

        class Subtraction(Expression):
            pass


# ===== Rendering =====
def test_str_renders_source_text() -> None:
    expression = Multiplication(Addition(Number(4), Number(5)), Number(2))
    assert str(expression) == "(4 + 5) * 2"


def test_repr_names_each_field() -> None:
    expression = Addition(Number(4), Multiplication(Number(5), Number(-2)))
    assert repr(expression) == (
        "Addition(left=Number(value=4), "
        "right=Multiplication(left=Number(value=5), right=Number(value=-2)))"
    )


def test_nodes_do_not_equal_other_types() -> None:
    assert Number(1) != 1
    assert Addition(Number(1), Number(2)) != (Number(1), Number(2))


# ===== Deep Trees =====
def test_deep_trees_compare_structurally() -> None:
    assert build_addition_chain(1000) == build_addition_chain(1000)
    assert build_addition_chain(1000) != build_addition_chain(999)
    assert build_addition_chain(5000) == build_addition_chain(5000)


def test_deep_trees_differing_at_the_leaf_are_not_equal() -> None:
    left: Expression = Number(1)
    right: Expression = Number(2)
    for _ in range(1000):
        left = Addition(Number(1), left)
        right = Addition(Number(1), right)
    assert left != right


def test_deep_trees_hash_consistently() -> None:
    assert hash(build_addition_chain(1000)) == hash(build_addition_chain(1000))
    assert len({build_addition_chain(1000), build_addition_chain(1000)}) == 1


def test_deep_trees_have_a_repr() -> None:
    text = repr(build_addition_chain(1000))
    assert text.startswith("Addition(left=Number(value=1), right=Addition(")
    assert text.count("Number(value=1)") == 1000


# ===== Large Literals =====
def test_literals_beyond_the_digit_limit_render() -> None:
    assert str(Number(10**5000)) == "1" + "0" * 5000
    assert repr(Number(-(10**5000))) == "Number(value=-1" + "0" * 5000 + ")"
