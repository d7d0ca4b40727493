from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, success
from ..container import Container
from ..core.constants import API_PREFIX
from ..security.guard import token_required


def register(app: Flask, container: Container) -> None:
    auth_required = token_required(container.token_service)

    # Open endpoint: attendance devices post here without a session token.
    @app.route(f"{API_PREFIX}/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        body = json_body()
        attendance_id = container.attendance_service.record(
            user_id=body.get("user_id"),
            attendance_date=body.get("attendance_date"),
            attendance_time=body.get("attendance_time"),
            status=body.get("status"),
        )
        return success({"id": attendance_id}, message="Attendance recorded successfully", status=201)

    @app.route(f"{API_PREFIX}/attendance/history/<int:user_id>", methods=["GET"], endpoint="attendance_history")
    @auth_required
    def attendance_history(user_id: int):
        records = container.attendance_service.history(user_id)
        return success([r.to_history_item() for r in records])

    @app.route(f"{API_PREFIX}/attendance/summary/<int:user_id>", methods=["GET"], endpoint="attendance_summary")
    @auth_required
    def attendance_summary(user_id: int):
        summary = container.report_service.monthly_summary(
            user_id,
            month=request.args.get("month"),
            year=request.args.get("year"),
        )
        return success(summary.to_dict())

    @app.route(f"{API_PREFIX}/attendance/analysis", methods=["POST"], endpoint="attendance_analysis")
    @auth_required
    def attendance_analysis():
        body = json_body()
        report = container.report_service.analyze(
            start_date=body.get("start_date"),
            end_date=body.get("end_date"),
            group_by=body.get("group_by"),
        )
        return success(report.to_dict())
