"""Page template.

The inline template is used unless a template file is configured.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from md2web.core.page import Page

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <link rel="icon" href="{{ static }}/favicon.png">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <style>
      * {
        font-family: Helvetica, Arial, Sans-Serif;
        color: #262626;
      }
      #wrapper {
        max-width: 720px;
        margin: 0 auto;
      }
      p {
        line-height: 1.5em;
      }
      pre {
        border: 2px solid #262626;
        padding: 5px;
        background-color: #fff5e6;
        overflow-x: scroll;
      }
      code {
        font-family: monospace;
      }
      body {
        background-color: #fdfdfd;
      }
      header {
        padding: 25px;
        font-size: 2.5em;
        text-align: center;
      }
      header a {
        color: #375eab;
        font-weight: bold;
        padding-right: 10px;
        text-decoration: none;
      }
      header a:hover {
        text-decoration: underline;
      }
      nav {
        font-size: 1.2em;
        text-align: center;
      }
      nav a {
        text-decoration: none;
        padding-right: 10px;
      }
      nav a:hover {
        color: #375eab;
      }
      section {
        padding: 25px;
        font-size: 1.2em;
      }
    </style>
  </head>
  <body>
    <div id="wrapper">
      <header>
        {% for link in header_links %}
          <a href="{{ link.target }}">{{ link.label }}</a>
        {% endfor %}
      </header>
      <nav>
        {% for link in nav_links %}
          <a href="{{ link.target }}">{{ link.label }}</a>
        {% endfor %}
      </nav>
      <section>
        {% if message %}
          <p class="message">{{ message }}</p>
        {% else %}
          {{ content | safe }}
        {% endif %}
      </section>
    </div>
  </body>
</html>
"""


def load_template(path: Path | None = None) -> Template:
    """Load the page template.

    Args:
        path: Optional template file replacing the inline template

    Returns:
        Compiled Jinja2 template

    Raises:
        FileNotFoundError: If path is given but doesn't exist
    """
    if path is None:
        env = Environment(autoescape=select_autoescape(default_for_string=True))
        return env.from_string(PAGE_TEMPLATE)

    if not path.is_file():
        raise FileNotFoundError(f"Template file not found: {path}")
    env = Environment(
        loader=FileSystemLoader(path.parent),
        autoescape=select_autoescape(["html", "htm"]),
    )
    return env.get_template(path.name)


def render_page(template: Template, page: Page, static_url: str) -> str:
    """Render a page to HTML."""
    return template.render(
        title=page.title,
        static=static_url,
        header_links=page.header_links,
        nav_links=page.nav_links,
        content=page.content,
        message=page.message,
    )
