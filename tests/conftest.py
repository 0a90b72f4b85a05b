import os
import tempfile

import pytest

# Keep test log files out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="qavah-logs-"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from external.catalog import Catalog  # noqa: E402
from main.setup import create_app  # noqa: E402

from factories import sample_products  # noqa: E402


@pytest.fixture
def products():
    return sample_products()


@pytest.fixture
def catalog(products):
    return Catalog(products)


@pytest.fixture
def app(catalog):
    app = create_app(catalog=catalog, config_overrides={"TESTING": True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
