"""Header and footer banners wrapped around the rendered output."""

from aidump.types import RenderMode

RULE = "=" * 64

MODE_LABELS = {
    RenderMode.DUMP: "AI-ready file output",
    RenderMode.TREE: "AI-ready directory tree",
}


def format_header(project_name: str, mode: RenderMode) -> str:
    """Banner opening the output.

    Example:
        >>> format_header("shop", RenderMode.DUMP).splitlines()[0]
        'AI-ready file output for the project "shop"'
    """
    return f'{MODE_LABELS[mode]} for the project "{project_name}"\n{RULE}\n\n'


def format_footer(project_name: str, mode: RenderMode) -> str:
    """Banner closing the output, reminding the reader of the project name.

    The tree body does not end with a blank line, so tree mode inserts one before
    the closing rule.
    """
    lead = "\n" if mode == RenderMode.TREE else ""
    return (
        f"{lead}{RULE}\n"
        f'End of {MODE_LABELS[mode]} for the project "{project_name}"\n\n'
        f'Remember this project as "{project_name}" and wait for further instructions.\n'
    )
