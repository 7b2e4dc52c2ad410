"""
HTML page templates for book pages and the index.
"""

import html
from typing import List

LAYOUT_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>{title}</title>
<style>
  body {{ margin:0 auto; padding:24px; max-width:960px;
         font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial; }}
  h1 {{ margin:0 0 18px; font-size:1.6rem; }}
  h2 {{ margin:24px 0 8px; font-size:1.1rem; }}
  ul {{ margin:6px 0; padding-left:22px; }}
  li {{ white-space:pre; font-family: ui-monospace, Menlo, Consolas, monospace; }}
</style>
</head>
<body>
<h1>{title}</h1>
{content}
</body>
</html>
"""

SHOW_TEMPLATE = """<main class="book">
{body}
</main>"""

INDEX_TEMPLATE = """<ul class="books">
{items}
</ul>"""

INDEX_ITEM_TEMPLATE = '<li><a href="{href}">{label}</a></li>'


def render_layout(title: str, content: str) -> str:
    """Wrap already-rendered markup in the page layout."""
    return LAYOUT_TEMPLATE.format(title=html.escape(title), content=content)


def render_book_page(title: str, body: str) -> str:
    """
    Render a book page.

    Args:
        title: Page title, usually the book directory name
        body: The book tree rendered as HTML

    Returns:
        str: Complete HTML document
    """
    return render_layout(title, SHOW_TEMPLATE.format(body=body))


def render_index(title: str, paths: List[str]) -> str:
    """
    Render the index page linking every book page.

    Args:
        title: Page title
        paths: Relative paths of the book pages, in display order

    Returns:
        str: Complete HTML document
    """
    items = "\n".join(
        INDEX_ITEM_TEMPLATE.format(
            href=html.escape(path, quote=True),
            label=html.escape(path.rsplit('.', 1)[0])
        )
        for path in paths
    )
    return render_layout(title, INDEX_TEMPLATE.format(items=items))
