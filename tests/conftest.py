import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # The CLIs call logging.basicConfig(force=True); undo it between tests.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
