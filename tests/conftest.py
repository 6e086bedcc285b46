import importlib
import pytest

@pytest.fixture(scope="session")
def codec():
    return importlib.import_module("bn_str.codec")

@pytest.fixture(scope="session")
def inputs():
    return importlib.import_module("bn_str.inputs")

@pytest.fixture(scope="session")
def convert():
    return importlib.import_module("bn_str.convert")

@pytest.fixture(scope="session")
def arith():
    return importlib.import_module("bn_str.arith")

@pytest.fixture(scope="session")
def engine():
    return importlib.import_module("bn_str.engine")
