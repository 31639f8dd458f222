import pytest

from pyprettier.doc import (
    Group,
    concat,
    debug_doc,
    group,
    hardline,
    if_break,
    indent,
    join,
    line,
    print_doc_to_string,
    propagate_breaks,
    softline,
)
from pyprettier.format import FormatOptions


def _bracketed(items: list[str]):
    return group(
        concat(
            [
                "[",
                indent(concat([softline, join(concat([",", line]), items)])),
                if_break(","),
                softline,
                "]",
            ]
        )
    )


def test_group_stays_flat_when_it_fits() -> None:
    assert print_doc_to_string(_bracketed(["a", "b"]), FormatOptions(print_width=10)) == "[a, b]"


def test_group_breaks_when_too_wide() -> None:
    doc = _bracketed(["alpha", "beta"])

    output = print_doc_to_string(doc, FormatOptions(print_width=10, tab_width=2))

    assert output == "[\n  alpha,\n  beta,\n]"


def test_fits_accounts_for_trailing_content() -> None:
    doc = concat([_bracketed(["a", "b"]), " + tail"])

    assert print_doc_to_string(doc, FormatOptions(print_width=8, tab_width=2)) == "[\n  a,\n  b,\n] + tail"


def test_top_level_lines_break() -> None:
    assert print_doc_to_string(concat(["a", line, "b", softline, "c"])) == "a\nb\nc"


def test_hardline_breaks_enclosing_group() -> None:
    doc = group(concat(["a", line, "b", hardline, "c"]))

    propagated = propagate_breaks(doc)

    assert isinstance(propagated, Group)
    assert propagated.should_break is True
    assert print_doc_to_string(doc) == "a\nb\nc"


def test_nested_group_may_stay_flat_inside_broken_group() -> None:
    inner = group(concat(["(", softline, "x", softline, ")"]))
    doc = group(concat(["start", indent(concat([line, inner])), line, "end", hardline]))

    output = print_doc_to_string(doc, FormatOptions(tab_width=4))

    assert output == "start\n    (x)\nend\n"


def test_blank_lines_carry_no_indentation() -> None:
    doc = concat(["a", indent(concat([hardline, hardline, "b"]))])

    assert print_doc_to_string(doc, FormatOptions(tab_width=2)) == "a\n\n  b"


def test_if_break_uses_flat_contents_when_flat() -> None:
    doc = group(concat(["x", if_break("!", "?")]))

    assert print_doc_to_string(doc) == "x?"


def test_debug_doc_notation() -> None:
    doc = group(concat(["(", indent(concat([softline, "a"])), softline, ")", hardline]))

    assert debug_doc(doc) == "group(['(', indent([softline, 'a']), softline, ')', hardline])"


def test_invalid_fragment_is_rejected() -> None:
    with pytest.raises(TypeError):
        print_doc_to_string(concat([1]))  # type: ignore[list-item]
