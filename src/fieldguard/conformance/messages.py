"""Builders for the human-readable violation messages predicates return."""


def max_len_error(length: int) -> str:
    return f"must be no more than {length} characters"


def regex_error(msg: str, fmt: str, *examples: str) -> str:
    """
    Describe a regex mismatch, optionally with valid examples.

    >>> regex_error("bad", "[a-z]+", "abc")
    "bad (e.g. 'abc', regex used for validation is '[a-z]+')"
    """
    if not examples:
        return f"{msg} (regex used for validation is '{fmt}')"
    quoted = " or ".join(f"'{example}'," for example in examples)
    return f"{msg} (e.g. {quoted} regex used for validation is '{fmt}')"
