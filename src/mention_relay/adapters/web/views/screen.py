"""Full-screen display page for the latest mention."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markupsafe import Markup, escape

if TYPE_CHECKING:
    from mention_relay.domain.models.media_record import MediaRecord

_SCREEN_TEMPLATE = """<!doctype html><html>
<head><meta name="viewport" content="width=device-width,initial-scale=1" />
<title>{title}</title>
<style>
  html,body{{margin:0;height:100%;background:#000;}}
  #wrap{{display:flex;height:100%;align-items:center;justify-content:center;}}
  img{{max-width:100vw;max-height:100vh;object-fit:contain;}}
  #hint{{position:fixed;bottom:12px;left:12px;color:#fff;font:14px system-ui;opacity:.7;}}
</style></head>
<body>
  <div id="wrap"><img id="img" src="{media_url}" alt="{alt}"></div>
  <div id="hint">{hint}</div>
<script>
  const img = document.getElementById("img");
  const es = new EventSource("{events_path}");
  es.onmessage = (ev) => {{
    const msg = JSON.parse(ev.data);
    const url = msg.type === "latest" && msg.latest ? msg.latest.mediaUrl : null;
    if (url) {{
      img.src = url + (url.includes("?") ? "&" : "?") + "t=" + Date.now();
      img.alt = msg.latest.caption || "";
    }}
  }};
</script>
</body></html>"""


def render_screen(
    record: MediaRecord,
    title: str,
    hint: str,
    events_path: str = "/events",
) -> Markup:
    """Render the display page showing the given record.

    Args:
        record: Record shown until the first live event arrives.
        title: Page title.
        hint: Text shown in the corner of the screen.
        events_path: Path of the event stream the page subscribes to.
    """
    return Markup(
        _SCREEN_TEMPLATE.format(
            title=escape(title),
            media_url=escape(record.media_url or ""),
            alt=escape(record.caption or ""),
            hint=escape(hint),
            events_path=escape(events_path),
        )
    )
