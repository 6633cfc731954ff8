"""Render a view as a standalone HTML page."""

import html

from surfin.ui.view import Style, View

PAGE_TITLE = "surfin"

# Line breaks stay literal "\n" inside <pre> to keep columns aligned
HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ margin: 0; padding: 1em; background: #1d1f21; color: #c5c8c6; }}
pre {{ margin: 0; font-family: "DejaVu Sans Mono", Menlo, Consolas, monospace; font-size: 14px; line-height: 1.2; }}
.red {{ color: #cc6666; }}
.green {{ color: #b5bd68; }}
.blue {{ color: #81a2be; }}
.bg-red {{ background: #5f2b2b; }}
.bg-green {{ background: #3b4a25; }}
.bg-blue {{ background: #2b3d52; }}
.bold {{ font-weight: bold; }}
</style>
</head>
<body>
<pre>{body}</pre>
</body>
</html>
"""


def css_classes(style: Style) -> list[str]:
    classes = []
    if style.foreground is not None:
        classes.append(style.foreground.value)
    if style.background is not None:
        classes.append(f"bg-{style.background.value}")
    if style.bold:
        classes.append("bold")
    return classes


def render_html(view: View, title: str = PAGE_TITLE) -> str:
    parts = []
    for span in view:
        if span.is_newline:
            parts.append("\n")
            continue
        text = html.escape(span.text, quote=False)
        classes = css_classes(span.style)
        if classes:
            parts.append(f'<span class="{" ".join(classes)}">{text}</span>')
        else:
            parts.append(text)
    return HTML_TEMPLATE.format(title=html.escape(title), body="".join(parts))
