import os

import pytest

# Tests start in extraction-only mode with the middleware enabled
os.environ.pop("APIKEY_AUTH_KEYS", None)
os.environ.pop("APIKEY_AUTH_DISABLED", None)


@pytest.fixture(autouse=True)
def reset_key_cache():
    import apikey_auth.services.api_keys as ak

    ak._keys = None
    yield
    ak._keys = None
