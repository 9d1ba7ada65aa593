from longlist.cell import CYAN, TextCell
from longlist.inode import render_inode


def test_blocklessness():
    expected = TextCell.paint(CYAN.underline(), "1414213")
    assert render_inode(1_414_213, CYAN.underline()) == expected


def test_width_matches_digits():
    assert render_inode(1_414_213, CYAN.underline()).width == 7