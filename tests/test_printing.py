import io

from bintree.node import Node
from bintree.printing import print_tree, render


def _sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def test_render_worked_example():
    root = Node(98)
    root.insert_left(12)
    root.insert_right(402)
    assert render(root) == "  .--(098)--.\n(012)     (402)\n"


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_render_negative_value_padding():
    assert render(Node(-5)) == "(-05)\n"


def test_render_none_is_empty():
    assert render(None) == ""


def test_line_count_matches_height():
    root = _sample()
    lines = render(root).splitlines()
    assert len(lines) == root.height() + 1


def test_every_value_appears_on_its_level():
    root = _sample()
    lines = render(root).splitlines()
    assert f"({root.value:03d})" in lines[0]
    for value in root.left.preorder():
        node_line = lines[1] if value == root.left.value else lines[2]
        assert f"({value:03d})" in node_line
    for value in (256, 512):
        assert f"({value:03d})" in lines[2]


def test_lines_have_no_trailing_spaces():
    lines = render(_sample()).splitlines()
    assert all(line == line.rstrip(" ") for line in lines)


def test_leaf_line_lists_values_in_order():
    root = _sample()
    bottom = render(root).splitlines()[-1]
    positions = [bottom.index(f"({v:03d})") for v in (6, 56, 256, 512)]
    assert positions == sorted(positions)


def test_print_tree_writes_render_to_stream():
    root = _sample()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = _sample()
    print_tree(root)
    assert capsys.readouterr().out == render(root)


def test_print_tree_none_writes_nothing(capsys):
    print_tree(None)
    assert capsys.readouterr().out == ""