import json
import os
from contextlib import contextmanager

import pytest

TEST_DIR = os.path.dirname(os.path.abspath(__file__))


@contextmanager
def not_raises(exception, message: str | None = ""):
    try:
        yield
    except exception as exc:
        if message == "":
            raise pytest.fail(f"DID RAISE {exception}")  # noqa: B904
        else:
            raise pytest.fail(message.format(exc=exc))  # noqa: B904


def load_geometries() -> list[dict]:
    with open(os.path.join(TEST_DIR, "data", "geometries.json")) as f:
        return json.load(f)
