"""Parse failures.

Productions return a ParseFailure instead of raising, so callers can discard
a failed speculative attempt and fall back to another shape. Only the front
door in nndot.parsers turns a failure into a DotSyntaxError.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nndot.types import FailureKind, Token

_PREVIEW_TOKENS = 8

_MESSAGES: dict[FailureKind, str] = {
    FailureKind.EmptyInput: "unexpected end of input",
    FailureKind.InvalidIdentifier: "invalid identifier",
    FailureKind.ExpectedEquals: "expected '='",
    FailureKind.ExpectedEdgeOperator: "expected edge operator '--' or '->'",
    FailureKind.ExpectedGraphKeyword: "expected 'graph' or 'digraph'",
    FailureKind.ExpectedOpenBrace: "expected '{'",
    FailureKind.ExpectedCloseBrace: "expected '}'",
    FailureKind.ExpectedStatement: "expected a statement",
    FailureKind.TrailingTokens: "unexpected tokens after graph",
}


@dataclass(frozen=True)
class ParseFailure:
    """A rejected production, located at ``pos`` in the full token sequence.

    The token sequence is shared, not copied, so building a failure for a
    discarded speculative attempt costs nothing.
    """

    kind: FailureKind
    tokens: tuple[Token, ...] = field(default=(), repr=False, compare=False)
    pos: int = 0
    causes: tuple[ParseFailure, ...] = ()

    @classmethod
    def at(
        cls,
        kind: FailureKind,
        tokens: tuple[Token, ...],
        pos: int = 0,
        causes: tuple[ParseFailure, ...] = (),
    ) -> ParseFailure:
        return cls(kind=kind, tokens=tokens, pos=pos, causes=causes)

    @property
    def remaining(self) -> tuple[Token, ...]:
        return self.tokens[self.pos :]

    @property
    def found(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    @property
    def message(self) -> str:
        msg = _MESSAGES[self.kind]
        if self.found is not None:
            msg += f", found {self.found!r}"
        return msg

    def innermost(self) -> ParseFailure:
        """Follow causes down to the most specific failure.

        Among sibling causes the one that got furthest into the input (highest
        position) wins; ties go to the earlier alternative.
        """
        failure = self
        while failure.causes:
            failure = max(failure.causes, key=lambda c: c.pos)
        return failure

    def describe(self) -> str:
        lines = [self.message]
        inner = self.innermost()
        if inner is not self:
            lines.append(f"  caused by: {inner.message}")
        preview_tokens = self.tokens[self.pos : self.pos + _PREVIEW_TOKENS]
        if preview_tokens:
            preview = " ".join(preview_tokens)
            if len(self.tokens) - self.pos > _PREVIEW_TOKENS:
                preview += " ..."
            lines.append(f"  at: {preview}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()


class DotSyntaxError(ValueError):
    """Raised by nndot.parse when the source is not a valid graph."""

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(failure.describe())
        self.failure = failure
