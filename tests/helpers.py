from io import StringIO


def assert_keywords_in_output(keywords: tuple[str, ...], stream: StringIO) -> None:
    output = stream.getvalue().lower()
    missing = [keyword for keyword in keywords if keyword.lower() not in output]
    assert not missing, f"{missing} not found in {output!r}"
