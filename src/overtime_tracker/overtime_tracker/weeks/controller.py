from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.session import RequestContext, login_required
from ..container import Container
from .payloads import CalculationPayload, WeekPayload


def register(app: Flask, container: Container) -> None:
    @app.route("/api/weeks", methods=["GET"], endpoint="api_weeks_list")
    @login_required
    def api_weeks_list(ctx: RequestContext):
        weeks = container.week_service.list_weeks(owner_id=ctx.user_id)
        return jsonify([w.to_json() for w in weeks])

    @app.route("/api/weeks", methods=["POST"], endpoint="api_weeks_create")
    @login_required
    def api_weeks_create(ctx: RequestContext):
        payload = WeekPayload.from_json(request.get_json(silent=True))
        week_id = container.week_service.save_week(owner_id=ctx.user_id, payload=payload)
        return jsonify({"success": True, "id": week_id})

    @app.route("/api/weeks/<int:week_id>", methods=["GET"], endpoint="api_weeks_get")
    @login_required
    def api_weeks_get(ctx: RequestContext, week_id: int):
        week = container.week_service.get_week(owner_id=ctx.user_id, week_id=week_id)
        return jsonify(week.to_json())

    @app.route("/api/weeks/<int:week_id>", methods=["DELETE"], endpoint="api_weeks_delete")
    @login_required
    def api_weeks_delete(ctx: RequestContext, week_id: int):
        container.week_service.delete_week(owner_id=ctx.user_id, week_id=week_id)
        return jsonify({"success": True})

    @app.route("/api/weeks/<int:week_id>/summary", methods=["GET"], endpoint="api_weeks_summary")
    @login_required
    def api_weeks_summary(ctx: RequestContext, week_id: int):
        week = container.week_service.get_week(owner_id=ctx.user_id, week_id=week_id)
        summary = container.payroll_service.summarize_week(week)
        return jsonify({"id": week.week_id, "label": week.label, "summary": summary.to_json()})

    @app.route("/api/calculate", methods=["POST"], endpoint="api_calculate")
    @login_required
    def api_calculate(ctx: RequestContext):
        payload = CalculationPayload.from_json(request.get_json(silent=True))
        summary = container.payroll_service.summarize(payload.entries, payload.config)
        return jsonify(summary.to_json())
