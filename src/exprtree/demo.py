from .frontend.parser import parse_expression
from .runtime.core import RuntimeContext
from .runtime.interpreter import evaluate
from .samples import build_product, build_sum, product_source
from .writer import TraceWriter, indented_output, title_box


def run_demo(writer: TraceWriter | None = None) -> None:
    writer = writer or TraceWriter()
    context = RuntimeContext(writer=writer)

    with title_box(writer, omit_lower_line=True):
        writer.println("ARITHMETIC EXPRESSIONS")

    for title, expression in (
        ("evaluate(sum)", build_sum()),
        ("evaluate(multiply)", build_product()),
        (f"evaluate(parse({product_source()!r}))", parse_expression(product_source())),
    ):
        with title_box(writer, omit_lower_line=True):
            writer.println(title)
            writer.newline(on_debug_only=True)
            with indented_output(writer):
                writer.println(f"{expression} -> {evaluate(expression, context)}")


if __name__ == "__main__":
    run_demo()
