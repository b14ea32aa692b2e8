from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthorizationError, DomainError, FetchFailure, ValidationError
from ..users.session import login_required, require_staff
from .formatting import format_relative, icon_for
from .payloads import parse_payload


def register(app: Flask, container: Container) -> None:
    def _serialize(n, now) -> dict:
        return {
            "id": n.notification_id,
            "title": n.title,
            "body": n.body,
            "category": n.category.value,
            "icon": icon_for(n.category),
            "sender_name": n.sender_name,
            "created_at": n.created_at.isoformat(),
            "relative_time": format_relative(n.created_at, now),
            "data": n.data,
        }

    def _json_body() -> dict:
        body = request.get_json(silent=True)
        return body if isinstance(body, dict) else {}

    def _object_field(body: dict, key: str) -> dict:
        value = body.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValidationError(f"'{key}' debe ser un objeto")
        return value

    @app.route("/api/notifications", endpoint="notifications_unread")
    @login_required
    def notifications_unread(ctx):
        try:
            items = container.notification_service.unread(ctx)
        except FetchFailure:
            return jsonify({"available": False, "notifications": [], "badge": ""}), 503

        now = container.clock()
        return jsonify({
            "available": True,
            "notifications": [_serialize(n, now) for n in items],
            "badge": container.notification_service.unread_badge(ctx),
        })

    @app.route("/api/notifications/<int:notification_id>/read", methods=["POST"], endpoint="notification_read")
    @login_required
    def notification_read(ctx, notification_id: int):
        try:
            updated = container.notification_service.mark_read(ctx, notification_id)
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 503
        if not updated:
            return jsonify({"success": False, "message": "Notificación no encontrada"}), 404
        return jsonify({"success": True})

    @app.route("/api/notifications/read-all", methods=["POST"], endpoint="notifications_read_all")
    @login_required
    def notifications_read_all(ctx):
        try:
            count = container.notification_service.mark_all_read(ctx)
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 503
        return jsonify({"success": True, "updated": count})

    @app.route("/api/notifications/send", methods=["POST"], endpoint="notification_send")
    @login_required
    def notification_send(ctx):
        data = _json_body()
        try:
            require_staff(ctx)
            payload = parse_payload(str(data.get("kind", "")), _object_field(data, "fields"))
            extra = _object_field(data, "data")
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        recipients = data.get("recipients")
        if isinstance(recipients, list):
            result = container.notification_service.send_bulk(ctx, recipients, payload, data=extra)
            return jsonify({"success": result.sent_count > 0, **result.to_dict()})

        ok = container.notification_service.send_to_user(ctx, data.get("recipient_id"), payload, data=extra)
        return jsonify({"success": ok}), (200 if ok else 400)

    @app.route("/api/notifications/group", methods=["POST"], endpoint="notification_group")
    @login_required
    def notification_group(ctx):
        data = _json_body()
        try:
            require_staff(ctx)
            payload = parse_payload(str(data.get("kind", "")), _object_field(data, "fields"))
            grade = int(data.get("grade", 0))
            result = container.notification_service.notify_group(ctx, grade, str(data.get("section", "")), payload)
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "Grado no válido"}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": result.sent_count > 0, **result.to_dict()})

    @app.route("/api/push/subscribe", methods=["POST"], endpoint="push_subscribe")
    @login_required
    def push_subscribe(ctx):
        data = request.get_json(silent=True) or {}
        try:
            container.push_service.register(ctx, str(data.get("player_id") or ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 503
        return jsonify({"success": True})

    @app.route("/api/push/unsubscribe", methods=["POST"], endpoint="push_unsubscribe")
    @login_required
    def push_unsubscribe(ctx):
        try:
            container.push_service.unregister(ctx)
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 503
        return jsonify({"success": True})
