## routes.py
from __future__ import annotations

import asyncio
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request, send_from_directory

from policy_docs.domain.models import SavedPaths

SAVE_OK_MESSAGE = "Documents saved successfully!"


def _failure(message: str):
    return jsonify(success=False, error=message), 500


def create_blueprint(policy_service, policy_repo, static_dir: Path, timeout_seconds: int) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.post("/api/save-policy")
    async def save_policy():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        policy_data = payload.get("policyData")
        html_content = payload.get("htmlContent")

        try:
            paths: SavedPaths = await asyncio.wait_for(
                policy_service.save_policy(policy_data, html_content),
                timeout=timeout_seconds,
            )
        except asyncio.TimeoutError:
            current_app.logger.error("Saving policy documents timed out after %ss", timeout_seconds)
            return _failure(f"Document generation timed out after {timeout_seconds} seconds.")
        except Exception as e:
            current_app.logger.exception("Failed to save policy documents")
            return _failure(str(e))

        current_app.logger.info("Policy saved: %s", paths.pdf.name)
        return jsonify(success=True, message=SAVE_OK_MESSAGE, paths=paths.to_dict())

    @bp.get("/api/policies")
    def list_policies():
        try:
            policies = [entry.to_dict() for entry in policy_repo.list_policies()]
        except Exception as e:
            current_app.logger.exception("Failed to list saved policies")
            return _failure(str(e))

        current_app.logger.info("Policies listed: %d", len(policies))
        return jsonify(success=True, policies=policies)

    @bp.get("/")
    def index():
        return send_from_directory(static_dir, "index.html")

    return bp
