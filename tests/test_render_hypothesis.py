"""Property-based rendering tests.

Compares the rendered text of generated errors against a small reference
model of the layout and checks structural invariants of wrapped errors.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from diagnostix import DiagnosticError, new

_single_line = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\n"),
    min_size=1,
    max_size=20,
)
_multi_line = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)),
    min_size=1,
    max_size=30,
)
_codes = st.none() | st.integers(min_value=0, max_value=9999)


def _annotation(label: str, text: str) -> str:
    return "\n   = " + label + ": " + text.replace("\n", "\n           ")


def _expected_block(
    message: str,
    code: int | None,
    cause: str | None,
    notes: list[str],
    helps: list[str],
) -> str:
    prefix = "error" if code is None else f"error[E{code:04d}]"
    parts = [prefix, ": ", message]
    if cause is not None:
        first, *rest = cause.split("\n")
        parts.append("\n  --> " + first)
        parts.extend("\n   | " + line for line in rest)
    parts.extend(_annotation("note", note) for note in notes)
    parts.extend(_annotation("help", help_text) for help_text in helps)
    return "".join(parts)


def _build(
    message: str,
    code: int | None,
    cause: str | None,
    notes: list[str],
    helps: list[str],
) -> DiagnosticError:
    err = new(message)
    if code is not None:
        err.code(code)
    if cause is not None:
        err.cause(Exception(cause))
    for note in notes:
        err.note(note)
    for help_text in helps:
        err.help(help_text)
    return err


class TestRenderModel:
    """Rendered output matches the reference layout."""

    @given(
        _single_line,
        _codes,
        st.none() | _multi_line,
        st.lists(_multi_line, max_size=4),
        st.lists(_multi_line, max_size=4),
    )
    def test_single_error(
        self,
        message: str,
        code: int | None,
        cause: str | None,
        notes: list[str],
        helps: list[str],
    ) -> None:
        event(f"cause={'yes' if cause is not None else 'no'}")
        err = _build(message, code, cause, notes, helps)
        assert err.render() == _expected_block(message, code, cause, notes, helps)

    @given(_single_line, st.lists(_multi_line, max_size=3))
    def test_render_is_repeatable(self, message: str, notes: list[str]) -> None:
        err = _build(message, None, None, notes, [])
        assert err.render() == err.render() == str(err)


class TestWrappedStructure:
    """Wrapped errors form blank-line separated blocks."""

    @given(
        _single_line,
        st.lists(st.tuples(_single_line, st.lists(_multi_line, max_size=2)), max_size=5),
    )
    def test_one_block_per_wrapped_error(
        self, message: str, children: list[tuple[str, list[str]]]
    ) -> None:
        event(f"wrapped={len(children)}")
        err = new(message)
        for child_message, child_notes in children:
            err.wrap(_build(child_message, None, None, child_notes, []))

        blocks = err.render().split("\n\n")
        assert len(blocks) == len(children) + 1
        assert blocks[0] == f"error: {message}"
        for block, (child_message, child_notes) in zip(blocks[1:], children, strict=True):
            assert block == _expected_block(child_message, None, None, child_notes, [])
