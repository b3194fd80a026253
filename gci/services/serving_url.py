"""
Servicio: Serving URLs de imágenes
Convierte un path de Cloud Storage en una URL pública de la API de imágenes.
Si la API rechaza el archivo original, se copia como <nombre>.copy.<ext> y
se reintenta una sola vez con la copia.
"""
import logging
from dataclasses import dataclass

from ..errors import InvalidPath, ServingURLFailed
from ..utils import appengine, cloud_storage

logger = logging.getLogger(__name__)

COPY_MARKER = ".copy"

# Un objeto que ya es copia nunca se vuelve a copiar
MAX_COPY_RETRIES = 1


@dataclass(frozen=True)
class GcsPath:
    bucket: str
    key: str

    @classmethod
    def parse(cls, raw):
        """
        Parsea el parámetro gcs

        Acepta /<bucket>/<objeto> (lo que manda el CMS) y gs://<bucket>/<objeto>.
        El objeto puede tener "/" dentro.

        Raises:
            InvalidPath: Si falta el bucket o el objeto
        """
        if not raw:
            raise InvalidPath("falta el parámetro gcs", path=raw)

        if raw.startswith("gs://"):
            rest = raw[len("gs://"):]
        elif raw.startswith("/"):
            rest = raw[1:]
        else:
            raise InvalidPath("el path debe empezar con /", path=raw)

        bucket, _, key = rest.partition("/")
        if not bucket or not key:
            raise InvalidPath("el path debe tener bucket y objeto", path=raw)
        return cls(bucket=bucket, key=key)

    @property
    def path(self):
        return f"/{self.bucket}/{self.key}"

    @property
    def filename(self):
        """Path en el formato que espera Blobstore"""
        return f"/gs/{self.bucket}/{self.key}"

    @property
    def is_copy(self):
        return COPY_MARKER in self.key

    def copy_path(self):
        return GcsPath(bucket=self.bucket, key=add_copy_marker(self.key))


def add_copy_marker(key):
    """
    Inserta ".copy" antes de la extensión del nombre de archivo

    foo.png -> foo.copy.png, a.b.c -> a.b.copy.c, foo -> foo.copy
    Las carpetas del path no se tocan.
    """
    folder, sep, name = key.rpartition("/")
    stem, dot, ext = name.rpartition(".")
    # Sin extensión (o archivo oculto tipo ".env"): agregar al final
    if not dot or not stem:
        new_name = name + COPY_MARKER
    else:
        new_name = f"{stem}{COPY_MARKER}.{ext}"
    return f"{folder}{sep}{new_name}"


def _serving_url_for(ctx, gcs_path, secure):
    blob_key = appengine.blob_key_for_file(ctx, gcs_path.filename)
    return appengine.serving_url(ctx, blob_key, secure=secure, filename=gcs_path.filename)


def clone_object(ctx, gcs_path):
    """
    Copia el objeto a su nombre .copy dentro del mismo bucket

    Returns:
        GcsPath: Path de la copia
    """
    copy_path = gcs_path.copy_path()
    cloud_storage.copy_object(ctx, gcs_path.bucket, gcs_path.key, copy_path.key)
    return copy_path


def get_serving_url(ctx, raw_path, secure=True):
    """
    Obtiene la serving URL de un archivo de Cloud Storage

    Args:
        ctx: RequestContext del request
        raw_path: Path /<bucket>/<objeto>
        secure: Pedir URL https

    Returns:
        str: URL pública de la imagen

    Raises:
        GciError: InvalidPath, LookupFailed, ServingURLFailed o CopyFailed
    """
    gcs_path = GcsPath.parse(raw_path)
    retries = 0

    while True:
        try:
            return _serving_url_for(ctx, gcs_path, secure)
        except ServingURLFailed as e:
            if gcs_path.is_copy or retries >= MAX_COPY_RETRIES:
                raise
            logger.warning(
                "⚠️ [%s] API de imágenes rechazó %s (%s), copiando archivo",
                ctx.request_id, gcs_path.path, e,
            )

        gcs_path = clone_object(ctx, gcs_path)
        retries += 1
