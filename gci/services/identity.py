"""
Servicio: Identidad de la app
Los buckets de GCS deben dar acceso a esta service account para que se
puedan crear serving URLs de sus imágenes.
"""
from ..errors import IdentityUnavailable
from ..utils import appengine


def get_service_account(ctx):
    """Email de la service account asociada a la app"""
    email = appengine.service_account(ctx)
    if not email:
        raise IdentityUnavailable("la plataforma no devolvió service account")
    return email
