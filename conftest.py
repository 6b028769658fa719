import pytest

from webcompat.config import clear_config_cache
from webcompat.runtime import clear_type_registry
from webcompat.web.engine import reset_default_data_store


@pytest.fixture(autouse=True)
def clean_state():
    """Start every test with no cached settings, registered types or shared data store."""
    clear_config_cache()
    clear_type_registry()
    reset_default_data_store()
    yield
    clear_config_cache()
    clear_type_registry()
    reset_default_data_store()
