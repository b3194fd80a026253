"""
Utilidad: Manejo de Google Cloud Storage
Cliente y copia de objetos dentro de un bucket
"""
import os
import json
import logging
import requests
from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import storage

from ..errors import CopyFailed

logger = logging.getLogger(__name__)


def get_storage_client():
    """
    Obtiene el cliente de Cloud Storage

    GOOGLE_APPLICATION_CREDENTIALS puede ser un JSON (variables de entorno de
    algunos hosts) o una ruta a archivo. Si no está, se usan las credenciales
    por defecto (la service account de App Engine).

    Raises:
        CopyFailed: Si no se puede crear el cliente
    """
    creds_json = (os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or "").strip()

    try:
        # Si es un JSON string, usarlo directamente
        if creds_json.startswith("{"):
            try:
                creds_data = json.loads(creds_json)
            except json.JSONDecodeError as e:
                raise CopyFailed(f"GOOGLE_APPLICATION_CREDENTIALS no es un JSON válido: {e}") from e
            logger.debug("🔑 Cloud Storage desde JSON. Project ID: %s", creds_data.get("project_id", "N/A"))
            return storage.Client.from_service_account_info(creds_data)

        # Si es una ruta de archivo (desarrollo local)
        if creds_json and os.path.exists(creds_json):
            logger.debug("📁 Cloud Storage desde archivo: %s", creds_json)
            return storage.Client.from_service_account_json(creds_json)

        return storage.Client()

    except (auth_exceptions.GoogleAuthError, ValueError) as e:
        raise CopyFailed(f"no se pudo inicializar Cloud Storage: {e}") from e


def copy_object(ctx, bucket_name, src_key, dst_key):
    """
    Copia un objeto dentro del mismo bucket (copia del lado del servidor)

    Args:
        ctx: RequestContext del request
        bucket_name: Nombre del bucket
        src_key: Objeto original
        dst_key: Nombre del objeto copia

    Returns:
        str: Nombre del objeto creado
    """
    path = f"/{bucket_name}/{src_key}"
    if ctx.expired:
        raise CopyFailed("deadline excedido", path=path)

    client = get_storage_client()

    try:
        bucket = client.bucket(bucket_name)
        src = bucket.blob(src_key)
        copied = bucket.copy_blob(src, bucket, new_name=dst_key, timeout=ctx.remaining())
    except api_exceptions.GoogleAPIError as e:
        raise CopyFailed(str(e), path=path) from e
    except auth_exceptions.GoogleAuthError as e:
        raise CopyFailed(str(e), path=path) from e
    except requests.exceptions.RequestException as e:
        raise CopyFailed(str(e), path=path) from e

    logger.info("📄 Objeto copiado: gs://%s/%s -> %s", bucket_name, src_key, copied.name)
    return copied.name
