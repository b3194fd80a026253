"""
Errores del servicio
Cada falla se registra en el log con su operación y path; al cliente
solo le llega {"success": false}
"""


class GciError(Exception):
    """Error base: guarda la operación, el path y el status HTTP"""

    status_code = 500
    operation = "gci"

    def __init__(self, message="", path=None, operation=None):
        super().__init__(message or self.__class__.__name__)
        self.path = path
        if operation:
            self.operation = operation

    def __str__(self):
        message = super().__str__()
        if self.path:
            return f"{self.operation} [{self.path}]: {message}"
        return f"{self.operation}: {message}"


class InvalidPath(GciError):
    """El parámetro gcs no tiene la forma /<bucket>/<objeto>"""
    status_code = 400
    operation = "parse_path"


class LookupFailed(GciError):
    operation = "blob_key_for_file"


class ServingURLFailed(GciError):
    operation = "serving_url"


class CopyFailed(GciError):
    operation = "copy_object"


class SerializationFailed(GciError):
    operation = "serialize"


class IdentityUnavailable(GciError):
    operation = "service_account"
