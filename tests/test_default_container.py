import pytest

import namewire
from namewire import NOT_FOUND, Container, ItemNotFoundError


@pytest.fixture(autouse=True)
def _fresh_default_container():
    namewire.reset_default_container()
    yield
    namewire.reset_default_container()


def test_get_container_is_shared():
    assert namewire.get_container() is namewire.get_container()
    assert isinstance(namewire.get_container(), Container)


def test_module_level_registration_and_get():
    namewire.register_value("config", {"env": "prod"})
    namewire.register_singleton("logger", lambda config: {"prefix": config["env"]})
    namewire.register_instance("request", ["logger", lambda log: {"log": log}])

    first = namewire.get("request")
    second = namewire.get("request")
    assert first == {"log": {"prefix": "prod"}}
    assert first is not second
    assert first["log"] is second["log"]


def test_module_level_miss():
    with pytest.raises(ItemNotFoundError):
        namewire.get("nonexistent")
    assert namewire.get("nonexistent", True) is NOT_FOUND


def test_module_level_reset_and_lock():
    namewire.register_value("a", 1)
    namewire.reset()
    assert namewire.get("a", True) is NOT_FOUND

    namewire.register_value("a", 1)
    namewire.lock()
    namewire.register_value("b", 2)
    namewire.reset()
    assert namewire.get("a") == 1
    assert namewire.get("b", True) is NOT_FOUND


def test_reset_default_container_clears_lock():
    namewire.lock()
    namewire.reset_default_container()
    namewire.register_value("a", 1)
    assert namewire.get("a") == 1
    assert not namewire.get_container().locked
