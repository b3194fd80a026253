"""
Utilidad: APIs de App Engine (bundled services)
Blobstore, Images y App Identity. Es el único módulo que las importa.
"""
import logging

from google.appengine.api import app_identity, blobstore, images
from google.appengine.runtime import apiproxy_errors

from ..errors import IdentityUnavailable, LookupFailed, ServingURLFailed

logger = logging.getLogger(__name__)


def blob_key_for_file(ctx, filename):
    """
    Obtiene el blob key de un archivo de Cloud Storage

    Args:
        ctx: RequestContext del request
        filename: Path en formato /gs/<bucket>/<objeto>

    Returns:
        str: Blob key que acepta la API de imágenes
    """
    if ctx.expired:
        raise LookupFailed("deadline excedido", path=filename)
    try:
        rpc = blobstore.create_rpc(deadline=ctx.remaining())
        return blobstore.create_gs_key(filename, rpc=rpc)
    except (blobstore.Error, apiproxy_errors.Error) as e:
        raise LookupFailed(str(e), path=filename) from e


def serving_url(ctx, blob_key, secure=True, filename=None):
    """
    Pide a la API de imágenes una URL pública para el blob

    Args:
        ctx: RequestContext del request
        blob_key: Blob key obtenido con blob_key_for_file
        secure: Si True, la URL es https
        filename: Solo para los mensajes de error

    Returns:
        str: URL de la imagen
    """
    if ctx.expired:
        raise ServingURLFailed("deadline excedido", path=filename)
    try:
        rpc = images.create_rpc(deadline=ctx.remaining())
        return images.get_serving_url(blob_key, secure_url=secure, rpc=rpc)
    except (images.Error, apiproxy_errors.Error) as e:
        raise ServingURLFailed(str(e), path=filename) from e


def service_account(ctx):
    """Email de la service account con la que corre la app"""
    if ctx.expired:
        raise IdentityUnavailable("deadline excedido")
    try:
        return app_identity.get_service_account_name(deadline=ctx.remaining())
    except (app_identity.Error, apiproxy_errors.Error) as e:
        raise IdentityUnavailable(str(e)) from e


def wrap_app(flask_app):
    """Envuelve la app WSGI para que las APIs de App Engine estén disponibles"""
    from google.appengine.api import wrap_wsgi_app

    flask_app.wsgi_app = wrap_wsgi_app(flask_app.wsgi_app)
    logger.info("🔌 APIs de App Engine habilitadas")
    return flask_app
