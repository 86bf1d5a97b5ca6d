APP_ORG = "MDEdit"
APP_NAME = "MDEdit"
APP_DIR = "MDEdit"
UNTITLED = "Untitled"

CSS_PREVIEW = """
:root { --bg:#ffffff; --fg:#333; --muted:#666; --code:#f4f4f4; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, BlinkMacSystemFont, Segoe UI, Roboto, Helvetica Neue, Arial, sans-serif;
       line-height: 1.6; padding: 20px; max-width: 900px; margin: 0 auto; }
h1,h2,h3,h4,h5,h6 { margin-top: 24px; margin-bottom: 16px; }
pre { padding:12px; overflow-x:auto; border-radius:5px; background:var(--code); }
code { background:var(--code); padding:2px 6px; border-radius:3px; font-family: Courier New, monospace; }
pre code { background:transparent; padding:0; }
blockquote { border-left:4px solid var(--border); margin-left:0; padding-left:16px; color:var(--muted); }
table { border-collapse: collapse; width: 100%; margin: 16px 0; }
th, td { border:1px solid var(--border); padding:8px; text-align:left; }
th { background:var(--code); }
img { max-width:100%; height:auto; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
hr { border:none; border-top:1px solid var(--border); margin:1.5rem 0; }
ul,ol { padding-left:1.5rem; }
ul.task-list { list-style:none; padding-left:.5rem; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

MARKDOWN_FILTER = "Markdown (*.md *.markdown *.mdown);;Text (*.txt);;All files (*)"
SAVE_FILTER = "Markdown (*.md);;All files (*)"
DEFAULT_SUFFIX = ".md"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_SPLITTER = "window/splitter"

RECENTS_FILE = "recent-files.json"
MAX_RECENTS = 10

LOG_FILE = "mdedit.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
