from lsprotocol.types import DiagnosticSeverity, Position

from drift_lsp.indexer import BUILTIN_SIGNATURES, build_index
from drift_lsp.server import DocumentState, _extract_word_at, build_diagnostics, hover_text


def test_index_definitions():
    idx = build_index("(define f (lambda (a) a)) (define x 1)")
    assert set(idx.symbols) == {"f", "x"}
    assert idx.symbols["f"].kind == "function"
    assert (idx.symbols["f"].line, idx.symbols["f"].col) == (0, 8)
    assert idx.symbols["x"].kind == "var"
    assert (idx.symbols["x"].line, idx.symbols["x"].col) == (0, 34)
    assert idx.diagnostics == []
    assert idx.paren_balance == 0


def test_index_positions_are_zero_based():
    idx = build_index("(define a 1)\n(define b 2)")
    assert (idx.symbols["b"].line, idx.symbols["b"].col) == (1, 8)


def test_index_reports_lexer_diagnostics():
    idx = build_index("(list 1x)")
    assert len(idx.diagnostics) == 1
    diag = idx.diagnostics[0]
    assert diag.severity == "warning"
    assert (diag.line, diag.col) == (0, 6)


def test_index_reports_compile_errors():
    idx = build_index("(define x 1)\n(5 2)")
    assert [d.severity for d in idx.diagnostics] == ["error"]
    assert (idx.diagnostics[0].line, idx.diagnostics[0].col) == (1, 1)


def test_index_does_not_run_code():
    idx = build_index("(define x (undefined_fn))")
    assert idx.diagnostics == []
    assert "x" in idx.symbols


def test_build_diagnostics():
    idx = build_index("(define x 1")
    diags = build_diagnostics(idx)
    assert [d.severity for d in diags] == [DiagnosticSeverity.Error, DiagnosticSeverity.Warning]
    assert diags[1].message == "Unmatched parentheses detected"
    assert all(d.source == "drift-ls" for d in diags)


def test_hover_text():
    text = "(define total 3)"
    state = DocumentState(text=text, index=build_index(text))
    assert hover_text(state, "lambda") == BUILTIN_SIGNATURES["lambda"]
    assert hover_text(state, "total") == "total: var (defined at 1:9)"
    assert hover_text(state, "unknown") is None


def test_extract_word_at():
    text = "(define my_name 3)\n(print my_name)"
    assert _extract_word_at(text, Position(line=0, character=10)) == "my_name"
    assert _extract_word_at(text, Position(line=1, character=2)) == "print"
    assert _extract_word_at(text, Position(line=5, character=0)) is None
