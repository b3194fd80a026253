import os

os.environ.setdefault("FLASK_ENV", "testing")

import pytest

from gci.config import TestingConfig
from gci.errors import LookupFailed, ServingURLFailed
from gci.utils import appengine, cloud_storage
from gci.utils.context import RequestContext
from wsgi import create_app

SERVICE_ACCOUNT = "x@y.iam.gserviceaccount.com"


class FakePlatform:
    """Reemplaza Blobstore, Images, App Identity y la copia en GCS"""

    def __init__(self):
        # filename (/gs/...) -> url; si no está, la API de imágenes lo rechaza
        self.serving_urls = {}
        self.lookup_errors = set()
        self.copy_error = None
        self.identity = SERVICE_ACCOUNT
        self.identity_error = None

        self.lookups = []
        self.serving_calls = []
        self.copies = []
        self.deadlines = []

    def blob_key_for_file(self, ctx, filename):
        self.lookups.append(filename)
        self.deadlines.append(ctx.remaining())
        if filename in self.lookup_errors:
            raise LookupFailed("blob no encontrado", path=filename)
        return "key:" + filename

    def serving_url(self, ctx, blob_key, secure=True, filename=None):
        self.serving_calls.append((blob_key, secure))
        filename = blob_key[len("key:"):]
        url = self.serving_urls.get(filename)
        if url is None:
            raise ServingURLFailed("imagen rechazada", path=filename)
        return url

    def copy_object(self, ctx, bucket_name, src_key, dst_key):
        self.copies.append((bucket_name, src_key, dst_key))
        self.deadlines.append(ctx.remaining())
        if self.copy_error:
            raise self.copy_error
        return dst_key

    def service_account(self, ctx):
        self.deadlines.append(ctx.remaining())
        if self.identity_error:
            raise self.identity_error
        return self.identity


@pytest.fixture
def platform(monkeypatch):
    fake = FakePlatform()
    monkeypatch.setattr(appengine, "blob_key_for_file", fake.blob_key_for_file)
    monkeypatch.setattr(appengine, "serving_url", fake.serving_url)
    monkeypatch.setattr(appengine, "service_account", fake.service_account)
    monkeypatch.setattr(cloud_storage, "copy_object", fake.copy_object)
    return fake


@pytest.fixture
def ctx():
    return RequestContext.create(5, request_id="test")


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
