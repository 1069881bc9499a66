# templates.py
# Jinja2 source for the dashboards. Autoescape is on, so every value
# interpolated below is HTML-escaped.

DASHBOARD_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ title }}</title>
  <style>
    :root{--bg:#0f1720;--panel:#17212b;--border:#263443;--text:#dbe4ee;--muted:#7f93a8;
          --accent:#3fa9f5;--green:#2ecc71;--amber:#f5a623;--red:#e74c3c;
          --mono:Consolas,"SFMono-Regular",Menlo,monospace}
    *{box-sizing:border-box}
    body{margin:0;padding:24px;background:var(--bg);color:var(--text);font-family:"Segoe UI",Arial,sans-serif}
    header{display:flex;justify-content:space-between;align-items:baseline;flex-wrap:wrap;gap:8px;margin-bottom:20px}
    h1{margin:0;font-size:24px}
    .generated,#clock{color:var(--muted);font-family:var(--mono);font-size:13px}
    .summary{display:grid;grid-template-columns:repeat(auto-fill,minmax(200px,1fr));gap:12px;margin-bottom:20px}
    .metric{background:var(--panel);border:1px solid var(--border);border-radius:8px;padding:12px 14px}
    .metric-label{color:var(--muted);font-size:12px;text-transform:uppercase;letter-spacing:.04em}
    .metric-value{font-size:20px;margin-top:4px;word-break:break-word}
    .bar{height:6px;background:var(--border);border-radius:3px;margin-top:8px;overflow:hidden}
    .bar-fill{height:100%;background:var(--green)}
    .severity-medium .bar-fill{background:var(--amber)}
    .severity-high .bar-fill{background:var(--red)}
    .badge{display:inline-block;margin-top:6px;font-size:11px;font-family:var(--mono);text-transform:uppercase;color:var(--muted)}
    .severity-medium .badge{color:var(--amber)}
    .severity-high .badge{color:var(--red)}
    .search{margin-bottom:16px}
    .search input{width:100%;padding:10px 12px;background:var(--panel);border:1px solid var(--border);
                  border-radius:6px;color:var(--text);font-size:14px}
    .cards{display:grid;grid-template-columns:repeat(auto-fill,minmax(320px,1fr));gap:12px}
    .card{background:var(--panel);border:1px solid var(--border);border-radius:8px;overflow:hidden}
    .card-header{padding:10px 14px;border-bottom:1px solid var(--border);color:var(--accent);
                 font-family:var(--mono);font-size:14px;word-break:break-all}
    .card table{width:100%;border-collapse:collapse;font-size:13px}
    .card th{text-align:left;color:var(--muted);font-weight:normal;padding:4px 14px;width:40%;vertical-align:top}
    .card td{padding:4px 14px;font-family:var(--mono);word-break:break-all}
    .no-results{padding:32px;text-align:center;color:var(--muted)}
    footer{margin-top:24px;color:var(--muted);font-size:12px}
  </style>
</head>
<body>
<header>
  <h1>{{ title }}</h1>
  {% if show_clock %}<div id="clock"></div>{% endif %}
  <div class="generated">Generated {{ generated_at }}</div>
</header>

<section class="summary">
{% for metric in metrics %}
  <div class="metric{% if metric.severity %} severity-{{ metric.severity }}{% endif %}">
    <div class="metric-label">{{ metric.label }}</div>
    <div class="metric-value">{{ metric.value }}</div>
    {% if metric.severity %}
    <div class="bar"><div class="bar-fill" style="width:{{ metric.width }}%"></div></div>
    <span class="badge">{{ metric.severity }}</span>
    {% endif %}
  </div>
{% endfor %}
</section>

<div class="search">
  <input type="text" id="search" placeholder="Search records..." autocomplete="off" value="{{ search }}">
</div>

<div id="cards" class="cards">
{% for card in cards %}
  <div class="card" data-search="{{ card.search }}"{% if not card.visible %} style="display:none"{% endif %}>
    <div class="card-header">{{ card.header }}</div>
    <table>
    {% for label, value in card.fields %}
      <tr><th>{{ label }}</th><td>{{ value }}</td></tr>
    {% endfor %}
    </table>
  </div>
{% endfor %}
</div>

<div id="no-results" class="no-results"{% if not no_results %} style="display:none"{% endif %}>No matching records.</div>

<footer>{{ cards|length }} record(s)</footer>

<script>
(function () {
  var input = document.getElementById("search");
  var cards = document.querySelectorAll("#cards .card");
  var notice = document.getElementById("no-results");

  function filterCards() {
    var needle = input.value.toLowerCase();
    var visible = 0;
    for (var i = 0; i < cards.length; i++) {
      var hit = cards[i].getAttribute("data-search").indexOf(needle) !== -1;
      cards[i].style.display = hit ? "" : "none";
      if (hit) { visible++; }
    }
    notice.style.display = visible === 0 ? "" : "none";
  }

  input.addEventListener("keyup", filterCards);
{% if show_clock %}
  var clock = document.getElementById("clock");
  function tick() { clock.textContent = new Date().toLocaleString(); }
  tick();
  setInterval(tick, 1000);
{% endif %}
})();
</script>
</body>
</html>
"""
