import json
from pathlib import Path

import pytest

samples_dir = Path(__file__).parent / "samples"


def load_sample(name):
    with (samples_dir / name).open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def licenses_doc():
    """A fresh copy of the sample licenses.json, safe to modify"""
    return load_sample("licenses.json")


@pytest.fixture
def exceptions_doc():
    """A fresh copy of the sample exceptions.json, safe to modify"""
    return load_sample("exceptions.json")
