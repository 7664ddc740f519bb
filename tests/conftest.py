import json
import os

import pytest


@pytest.fixture()
def test_dir():
    return os.path.dirname(os.path.abspath(__file__))


def _load(test_dir, name):
    with open(os.path.join(test_dir, "data", name)) as f:
        return json.load(f)


@pytest.fixture()
def feature(test_dir):
    return _load(test_dir, "feature.json")


@pytest.fixture()
def feature_foreign_members(test_dir):
    return _load(test_dir, "feature-foreign-members.json")


@pytest.fixture()
def feature_collection(test_dir):
    return _load(test_dir, "feature-collection.json")


@pytest.fixture()
def geometry_collection_nested(test_dir):
    return _load(test_dir, "geometry-collection-nested.json")


@pytest.fixture()
def geometries(test_dir):
    return _load(test_dir, "geometries.json")
