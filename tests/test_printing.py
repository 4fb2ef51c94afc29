import io

from bintrees_kit.printing import format_tree, print_tree
from bintrees_kit.tree import Node


def _main_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_format_complete_tree():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert format_tree(_main_tree()) == expected


def test_format_two_children():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    assert format_tree(root) == "  .--(098)--.\n(012)     (402)\n"


def test_format_right_chain():
    root = Node(98)
    root.right = Node(128, root)
    root.right.right = Node(402, root.right)
    assert format_tree(root) == "(098)--.\n     (128)--.\n          (402)\n"


def test_format_single_node():
    assert format_tree(Node(98)) == "(098)\n"


def test_format_negative_value():
    assert format_tree(Node(-1)) == "(-01)\n"


def test_format_empty_tree():
    assert format_tree(None) == ""


def test_print_tree_writes_rendering():
    buffer = io.StringIO()
    print_tree(_main_tree(), buffer)
    assert buffer.getvalue() == format_tree(_main_tree())
    assert buffer.getvalue().splitlines()[2] == "(006)     (016)     (256)     (512)"


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Node(7))
    assert capsys.readouterr().out == "(007)\n"


def test_print_empty_tree_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""