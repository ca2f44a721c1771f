"""Synthetic keystroke sequence for the editor's "Go To Line" command.

Tokens use SendKeys notation: "^g" is Ctrl+G, "{ENTER}" confirms the dialog,
every other token is a single character typed as-is.
"""

GOTO_LINE_CHORD = "^g"
CONFIRM = "{ENTER}"


def goto_line_sequence(line: int) -> list[str]:
    """Keystrokes that move the caret to a line.

    Args:
        line: 1-based line number.

    Returns:
        Chord, one token per digit of the line number, then confirm.
        For example 42 gives ["^g", "4", "2", "{ENTER}"].

    Raises:
        ValueError: If line is less than 1.
    """
    if line < 1:
        raise ValueError(f"line must be >= 1, got {line}")
    return [GOTO_LINE_CHORD, *str(line), CONFIRM]
