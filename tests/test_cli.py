import io

import pytest

from bintrees_kit.cli import main
from bintrees_kit.printing import format_tree
from bintrees_kit.tree import Node


def _expected_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_main_returns_zero(capsys):
    assert main([]) == 0
    capsys.readouterr()


def test_main_prints_sample_tree(capsys):
    main([])
    out = capsys.readouterr().out
    assert out == format_tree(_expected_tree())


def test_main_output_layout(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "       .-------(098)-------."
    assert lines[2].split() == ["(006)", "(016)", "(256)", "(512)"]


def test_main_rejects_unknown_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
    capsys.readouterr()


def test_main_output_ends_with_newline(capsys):
    main([])
    out = capsys.readouterr().out
    buffer = io.StringIO(out)
    assert buffer.getvalue().endswith("\n")
    assert "(402)" in out