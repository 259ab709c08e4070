"""Smoke tests: imports work, package-level API works, CLI --help works."""

import pytest
from click.testing import CliRunner

from nndot.__main__ import main


def test_import():
    import nndot

    assert nndot is not None


def test_parse_dsl():
    from nndot import parse_dsl

    graph = parse_dsl("digraph { a -> b }")
    assert graph.directed is True
    assert graph.strict is False


def test_parse_dsl_trailing_tokens():
    from nndot import DotSyntaxError, parse_dsl

    with pytest.raises(DotSyntaxError) as excinfo:
        parse_dsl("graph { a } b")
    assert "unexpected tokens after graph" in str(excinfo.value)

    graph = parse_dsl("graph { a } b", allow_trailing=True)
    assert len(graph.stmts) == 1


def test_syntax_error_is_value_error():
    from nndot import parse

    with pytest.raises(ValueError):
        parse("graph { }")


def test_core_entry_points():
    from nndot import ParseFailure, parse_graph, tokenize

    graph, rest = parse_graph(tokenize("graph { a -- b }"))
    assert rest == ()
    assert not isinstance(parse_graph([]), tuple)
    assert isinstance(parse_graph([]), ParseFailure)


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "DOT graph description" in result.output


def test_dot_parser_satisfies_protocol():
    from nndot.parsers import DotParser, Parser

    assert isinstance(DotParser(), Parser)
