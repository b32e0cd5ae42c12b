"""Tests for the output banners."""

from aidump.banners import RULE, format_footer, format_header
from aidump.types import RenderMode


def test_rule_is_64_equals_signs():
    assert RULE == "=" * 64


def test_dump_header():
    assert format_header("shop", RenderMode.DUMP) == f'AI-ready file output for the project "shop"\n{RULE}\n\n'


def test_tree_header():
    assert format_header("shop", RenderMode.TREE).startswith('AI-ready directory tree for the project "shop"\n')


def test_dump_footer():
    assert format_footer("shop", RenderMode.DUMP) == (
        f"{RULE}\n"
        'End of AI-ready file output for the project "shop"\n\n'
        'Remember this project as "shop" and wait for further instructions.\n'
    )


def test_tree_footer_starts_with_blank_line():
    footer = format_footer("shop", RenderMode.TREE)
    assert footer.startswith(f"\n{RULE}\n")
    assert 'End of AI-ready directory tree for the project "shop"' in footer
