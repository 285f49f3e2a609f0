import pytest

from sexagesimal.units import set_default_symbols


@pytest.fixture(autouse=True)
def restore_default_symbols():
    yield
    set_default_symbols(None)
