"""
Configuración de la aplicación
Todo se lee desde variables de entorno (o .env en desarrollo)
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Directorio base del proyecto
BASE_DIR = Path(__file__).resolve().parent.parent

# Cargar .env desde el directorio del proyecto
load_dotenv(BASE_DIR / '.env')


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuración base"""

    # Flask
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    TESTING = False

    # CORS: los clientes del CMS llaman desde cualquier dominio
    ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")

    # Presupuesto de tiempo para las llamadas a las APIs de la plataforma
    API_DEADLINE_SECONDS = float(os.getenv("API_DEADLINE_SECONDS", "10"))

    # Pedir URLs https a la API de imágenes
    SERVING_URL_SECURE = _env_bool("SERVING_URL_SECURE", True)

    # Envolver la app con el middleware de App Engine (bundled services)
    USE_APP_ENGINE_APIS = _env_bool("USE_APP_ENGINE_APIS", True)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Google Cloud Storage
    GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")


class DevelopmentConfig(Config):
    """Configuración de desarrollo"""
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Configuración de producción"""
    DEBUG = False


class TestingConfig(Config):
    """Configuración para pytest"""
    TESTING = True
    DEBUG = False
    USE_APP_ENGINE_APIS = False
    ALLOWED_ORIGINS = "*"
    API_DEADLINE_SECONDS = 5.0
    SERVING_URL_SECURE = True


# Mapeo de configuraciones
config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config():
    """Obtiene la configuración según el entorno"""
    env = os.getenv("FLASK_ENV", "development")
    return config_by_name.get(env, DevelopmentConfig)
