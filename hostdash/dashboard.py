# dashboard.py
# Local preview server for the generated dashboards.
import argparse
from pathlib import Path

from flask import Flask, jsonify, render_template_string, send_file

from .config import load_config
from .logger_setup import init_logger, logger

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>hostdash</title>
  <style>
    body{font-family:Arial;padding:16px}
    li{margin:6px 0}
    .missing{color:#999}
  </style>
</head>
<body>
  <h1>Dashboards</h1>
  <ul>
  {% for name, path, exists in reports %}
    {% if exists %}
    <li><a href="/reports/{{ name }}">{{ name }}</a> <code>{{ path }}</code></li>
    {% else %}
    <li class="missing">{{ name }}: not generated yet (<code>{{ path }}</code>)</li>
    {% endif %}
  {% endfor %}
  </ul>
  <p><a href="/health">Health</a></p>
</body>
</html>
"""


def create_app(cfg=None):
    cfg = cfg or load_config()
    reports = {
        "dns": Path(cfg["DNS_OUTPUT"]).expanduser().resolve(),
        "system": Path(cfg["SYSTEM_OUTPUT"]).expanduser().resolve(),
    }

    app = Flask(__name__)

    @app.route("/")
    def index():
        rows = [(name, str(path), path.is_file()) for name, path in reports.items()]
        return render_template_string(TEMPLATE, reports=rows)

    @app.route("/reports/<name>")
    def report(name):
        path = reports.get(name)
        if path is None or not path.is_file():
            return jsonify({"error": "not found", "report": name}), 404
        return send_file(path, mimetype="text/html")

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not found"}), 404

    return app


def main(argv=None):
    cfg = load_config()
    parser = argparse.ArgumentParser(description="Serve the generated dashboards locally")
    parser.add_argument("--host", default=cfg["PREVIEW_HOST"])
    parser.add_argument("--port", type=int, default=cfg["PREVIEW_PORT"])
    args = parser.parse_args(argv)

    init_logger(cfg["LOG_DIR"], cfg["LOG_LEVEL"])
    logger.info("Starting dashboard preview on http://%s:%s" % (args.host, args.port))
    create_app(cfg).run(host=args.host, port=args.port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()
