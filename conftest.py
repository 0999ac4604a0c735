import pytest

import hemline.common


@pytest.fixture(autouse=True)
def isolated_bus(monkeypatch):
    # The CLI installs a renderer on the global bus; keep it from leaking
    # between tests.
    monkeypatch.setattr(hemline.common.bus, "_renderer", None)
    yield
