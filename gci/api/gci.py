"""
API: GCI
Serving URLs de imágenes en GCS y service account de la app
"""
import logging
from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from ..errors import GciError, SerializationFailed
from ..models import ServingURLResponse, ServiceAccountResponse
from ..services.identity import get_service_account
from ..services.serving_url import get_serving_url
from ..utils.context import RequestContext

logger = logging.getLogger(__name__)

bp = Blueprint("gci", __name__)


def _context():
    return RequestContext.from_request(request, current_app.config["API_DEADLINE_SECONDS"])


def _json_response(model, status=200):
    """Serializa el modelo; si falla, responde {"success": false} con 500"""
    try:
        return jsonify(model.to_dict()), status
    except (TypeError, ValueError) as e:
        error = SerializationFailed(str(e))
        logger.error("❌ Error serializando json: %s", error)
        return jsonify({"success": False}), error.status_code


@bp.after_request
def add_cors_headers(response):
    # flask-cors solo manda Allow-Headers en el preflight
    response.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
    return response


@bp.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception("❌ Error inesperado en %s", request.path)
    return jsonify({"success": False}), 500


@bp.route("/serving_url", methods=["GET"])
def serving_url():
    """
    Devuelve la serving URL de una imagen en GCS

    Query params:
        gcs: Path del archivo, ej: /mi-bucket/uploads/foto.png
    """
    ctx = _context()
    gcs_path = request.args.get("gcs", "")

    try:
        url = get_serving_url(ctx, gcs_path, secure=current_app.config["SERVING_URL_SECURE"])
    except GciError as e:
        logger.error("❌ [%s] No se pudo obtener serving url: %s", ctx.request_id, e)
        return _json_response(ServingURLResponse.failed(), e.status_code)

    logger.info("🖼️ [%s] Serving url para %s: %s", ctx.request_id, gcs_path, url)
    return _json_response(ServingURLResponse(success=True, serving_url=url))


@bp.route("/service_account", methods=["GET"])
def service_account():
    """
    Devuelve el email de la service account de la app

    Los buckets de GCS deben compartir acceso con esta cuenta para poder
    crear serving URLs.
    """
    ctx = _context()

    try:
        email = get_service_account(ctx)
    except GciError as e:
        logger.error("❌ [%s] No se pudo obtener service account: %s", ctx.request_id, e)
        return _json_response(ServiceAccountResponse.failed(), e.status_code)

    return _json_response(ServiceAccountResponse(success=True, service_account=email))
