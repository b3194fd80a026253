"""
Modelos de respuesta del servicio
Se crean por request y se serializan con to_dict()
"""
from .serving_url_response import ServingURLResponse
from .service_account_response import ServiceAccountResponse

__all__ = [
    "ServingURLResponse",
    "ServiceAccountResponse",
]
