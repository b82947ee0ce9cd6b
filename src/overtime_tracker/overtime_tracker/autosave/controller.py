from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.session import RequestContext, login_required
from ..container import Container
from .payloads import AutosavePayload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/autosave", methods=["GET"], endpoint="api_autosave_get")
    @login_required
    def api_autosave_get(ctx: RequestContext):
        slot = container.autosave_service.get(owner_id=ctx.user_id)
        return jsonify(slot.to_json() if slot else None)

    @app.route("/api/autosave", methods=["POST"], endpoint="api_autosave_save")
    @login_required
    def api_autosave_save(ctx: RequestContext):
        payload = AutosavePayload.from_json(request.get_json(silent=True))
        container.autosave_service.save(owner_id=ctx.user_id, payload=payload)
        return jsonify({"success": True})

    @app.route("/api/autosave", methods=["DELETE"], endpoint="api_autosave_clear")
    @login_required
    def api_autosave_clear(ctx: RequestContext):
        container.autosave_service.clear(owner_id=ctx.user_id)
        return jsonify({"success": True})
