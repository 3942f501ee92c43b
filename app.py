import logging

from flask import Flask, jsonify, redirect, render_template, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import settings
from carousel import FeaturedRotation, rotation_state
from catalog import STORE
from catalog.snippets import code_tabs, install_commands
from installation import InstallView, install_url, parse_status, start_install
from search import ViewState, distinct_categories, run_query, sort_by, top_n

app = Flask(__name__)
app.logger.setLevel(settings.LOG_LEVEL)
CORS(app, resources={r"/api/*": {"origins": "*"}})


def _bad_request(message):
    app.logger.warning("Rejected request to %s: %s", request.path, message)
    return jsonify({"error": message}), 400


def _parse_limit(raw):
    if raw is None or raw == "":
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"Invalid limit '{raw}'") from None
    if limit < 0:
        raise ValueError("limit must be zero or greater")
    return limit


@app.errorhandler(Exception)
def handle_unexpected_error(error):
    if isinstance(error, HTTPException):
        return error
    app.logger.exception("Unhandled error serving %s", request.path)
    if request.path.startswith("/api/"):
        return jsonify({"error": "Internal server error"}), 500
    return render_template("error.html"), 500


@app.route('/')
def home():
    try:
        state = ViewState.from_args(request.args, settings.DEFAULT_SORT)
    except ValueError as exc:
        app.logger.warning("Ignoring invalid view arguments: %s", exc)
        filters = {key: value for key, value in request.args.items() if key != "sort"}
        state = ViewState.from_args(filters, settings.DEFAULT_SORT)

    servers = run_query(STORE, state)
    rotation = FeaturedRotation(STORE)
    return render_template(
        'index.html',
        state=state,
        servers=servers,
        categories=distinct_categories(STORE),
        featured=rotation.items,
        carousel_interval=rotation.interval,
        top_servers=top_n(sort_by(STORE, "popular"), settings.TOP_SERVERS_LIMIT),
    )


@app.route('/servers/<server_id>')
def server_detail(server_id):
    server = STORE.resolve(server_id)
    return render_template(
        'server.html',
        server=server,
        placeholder=server_id not in STORE,
        code_tabs=code_tabs(server),
        similar=STORE.similar(server, settings.SIMILAR_SERVERS_LIMIT),
        copy_ack_seconds=settings.COPY_ACK_SECONDS,
    )


@app.route('/servers/<server_id>/install', methods=['GET'])
def install_page(server_id):
    server = STORE.resolve(server_id)
    view = InstallView.for_status(parse_status(request.args.get("status")))
    return render_template(
        'install.html',
        server=server,
        view=view,
        next_url=install_url(server_id, view.next_status),
        commands=install_commands(server_id),
        code_tabs=code_tabs(server),
        copy_ack_seconds=settings.COPY_ACK_SECONDS,
    )


@app.route('/servers/<server_id>/install', methods=['POST'])
def install_server(server_id):
    target_id = request.form.get("serverId") or server_id
    try:
        target = start_install(target_id)
    except ValueError as exc:
        return _bad_request(str(exc))
    return redirect(target, code=303)


@app.route('/api/servers')
def api_servers():
    try:
        state = ViewState.from_args(request.args, settings.DEFAULT_SORT)
        limit = _parse_limit(request.args.get("limit"))
    except ValueError as exc:
        return _bad_request(str(exc))

    results = run_query(STORE, state)
    if limit is not None:
        results = top_n(results, limit)

    app.logger.info("Catalog query %r returned %d servers", state.query, len(results))
    return jsonify(
        {
            "query": state.query,
            "category": state.category,
            "sort": state.sort,
            "count": len(results),
            "results": [server.to_dict() for server in results],
        }
    )


@app.route('/api/categories')
def api_categories():
    return jsonify(distinct_categories(STORE))


@app.route('/api/featured')
def api_featured():
    try:
        index = int(request.args.get("index", 0))
        elapsed = float(request.args.get("elapsed", 0))
        paused = request.args.get("paused", "false").lower() == "true"
        index, server = rotation_state(
            STORE, index, request.args.get("action"), elapsed=elapsed, paused=paused
        )
    except (ValueError, IndexError) as exc:
        return _bad_request(str(exc))

    return jsonify(
        {
            "index": index,
            "count": len(STORE.featured()),
            "interval": settings.CAROUSEL_INTERVAL_SECONDS,
            "server": server.to_dict() if server else None,
        }
    )


@app.route('/api/servers/<server_id>')
def api_server(server_id):
    payload = STORE.resolve(server_id).to_dict()
    payload["placeholder"] = server_id not in STORE
    return jsonify(payload)


@app.route('/api/servers/<server_id>/snippets')
def api_snippets(server_id):
    server = STORE.resolve(server_id)
    return jsonify(
        {
            "install": [snippet.to_dict() for snippet in install_commands(server_id)],
            "code": [snippet.to_dict() for snippet in code_tabs(server)],
            "copyAckSeconds": settings.COPY_ACK_SECONDS,
        }
    )


@app.route('/placeholder.svg')
def placeholder_image():
    width = request.args.get("width", 600, type=int)
    height = request.args.get("height", 400, type=int)
    svg = render_template(
        'placeholder.svg',
        width=max(1, min(width, 2000)),
        height=max(1, min(height, 2000)),
        text=request.args.get("text", ""),
    )
    return svg, 200, {"Content-Type": "image/svg+xml", "Cache-Control": "public, max-age=86400"}


@app.get('/health')
def health():
    return {"ok": True}, 200


if __name__ == '__main__':
    logging.basicConfig(level=settings.LOG_LEVEL)
    app.run(host="0.0.0.0", port=settings.PORT)
