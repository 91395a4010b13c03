"""Tests for ast_viz: ensure a Digraph is produced with one node per AST node."""

import shutil

import pytest

from ast_viz import render_ast_dot, write_and_render
from tests.utils import parse_text


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("a + 2 * b"))
    src = dot.source
    assert src.count("label=L") == 2
    assert src.count("label=R") == 2
    for name in ("n0", "n1", "n2", "n3", "n4"):
        assert name in src
    assert "n5" not in src


def test_ast_viz_single_leaf():
    src = render_ast_dot(parse_text("x")).source
    assert "n0" in src
    assert "->" not in src


@pytest.mark.skipif(shutil.which("dot") is None, reason="Graphviz not installed")
def test_write_and_render_creates_file(tmp_path):
    out = tmp_path / "ast"
    write_and_render(parse_text("(a + 1) < b"), str(out), fmt="svg")
    rendered = tmp_path / "ast.svg"
    assert rendered.exists()
    assert "<svg" in rendered.read_text(encoding="utf-8")
    # cleanup=True removes the intermediate dot source
    assert not out.exists()
