"""
GCI - Aplicación Flask Principal
Serving URLs de imágenes para archivos en Google Cloud Storage
"""
import logging
from flask import Flask
from flask_cors import CORS
from gci.config import get_config

logger = logging.getLogger(__name__)


def create_app(config_object=None):
    """Factory para crear la aplicación Flask"""
    app = Flask(__name__)

    # Cargar configuración
    app.config.from_object(config_object or get_config())

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Habilitar CORS
    # Los clientes del CMS llaman desde su propio dominio
    allowed_origins = [o.strip() for o in app.config["ALLOWED_ORIGINS"].split(",") if o.strip()]
    if not allowed_origins or "*" in allowed_origins:
        CORS(app, resources={r"/_/*": {
            "origins": "*",
            "send_wildcard": True,
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type"]
        }})
    else:
        # Producción: dominios específicos
        CORS(app, resources={r"/_/*": {
            "origins": allowed_origins,
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type"]
        }})

    # Registrar blueprints de APIs
    from gci.api import gci_bp

    app.register_blueprint(gci_bp, url_prefix="/_")

    # Ruta de health check
    @app.route("/health")
    def health():
        return {"status": "ok"}

    # Sin esto no funcionan Blobstore, Images ni App Identity
    if app.config["USE_APP_ENGINE_APIS"]:
        from gci.utils.appengine import wrap_app
        wrap_app(app)

    logger.info("starting gci server")
    return app


# Crear instancia de la app para gunicorn
app = create_app()

if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8080)
