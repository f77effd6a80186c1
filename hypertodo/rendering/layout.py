"""
Full-page document shell.
"""
from markupsafe import Markup

HTMX_SCRIPT = Markup(
    '<script src="https://unpkg.com/htmx.org@1.9.6" '
    'integrity="sha384-FhXw7b6AlE/jyjlZH5iHa/tTe9EpJ1Y55RjcgPbjeWMskSxZt1v9qkxLJWNJaGni" '
    'crossorigin="anonymous"></script>'
)
TAILWIND_SCRIPT = Markup('<script src="https://cdn.tailwindcss.com"></script>')
HYPERSCRIPT_SCRIPT = Markup('<script src="https://unpkg.com/hyperscript.org@0.9.11"></script>')

_BASE_HTML = Markup(
    '<!DOCTYPE html>\n'
    '<html lang="en">\n'
    '<head>\n'
    '  <meta charset="UTF-8">\n'
    '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
    '  <title>THE BETH STACK</title>\n'
    '  {htmx}\n'
    '  {tailwind}\n'
    '  {hyperscript}\n'
    '</head>\n'
    '{children}\n'
    '</html>\n'
)

# Loads the list as soon as the page is shown
_INDEX_BODY = Markup(
    '<body class="flex w-full h-screen justify-center items-center" '
    'hx-get="/todos" hx-trigger="load" hx-swap="innerHTML"></body>'
)


def render_base_html(children: Markup) -> Markup:
    """
    Wrap children in the HTML document with the htmx, Tailwind and
    hyperscript scripts loaded.

    Plain strings passed as children are escaped.
    """
    return _BASE_HTML.format(
        htmx=HTMX_SCRIPT,
        tailwind=TAILWIND_SCRIPT,
        hyperscript=HYPERSCRIPT_SCRIPT,
        children=children,
    )


def render_index_body() -> Markup:
    return _INDEX_BODY
