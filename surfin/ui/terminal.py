"""Render a view as ANSI-colored terminal text."""

from surfin.ui.view import Color, Style, View

ESC = "\x1b"
RESET = f"{ESC}[0m"
BOLD_CODE = 1

FG_CODES = {
    Color.RED: 31,
    Color.GREEN: 32,
    Color.BLUE: 34,
}

BG_CODES = {
    Color.RED: 41,
    Color.GREEN: 42,
    Color.BLUE: 44,
}


def sgr_codes(style: Style) -> list[int]:
    codes = []
    if style.bold:
        codes.append(BOLD_CODE)
    if style.foreground is not None:
        codes.append(FG_CODES[style.foreground])
    if style.background is not None:
        codes.append(BG_CODES[style.background])
    return codes


def render_terminal(view: View) -> str:
    parts = []
    for span in view:
        if span.is_newline:
            parts.append("\n")
            continue
        codes = sgr_codes(span.style)
        if codes:
            sgr = ";".join(str(c) for c in codes)
            parts.append(f"{ESC}[{sgr}m{span.text}{RESET}")
        else:
            parts.append(span.text)
    return "".join(parts)
