import unittest

from namewire import NOT_FOUND, Container


class TestLockedContainer(unittest.TestCase):
    cont: Container

    def setUp(self):
        self.cont = Container()
        self.cont.register_value("config", {"env": "prod"})
        self.cont.register_singleton("logger", lambda config: {"prefix": config["env"]})
        self.cont.lock()

    def test_lock_sets_flag(self):
        assert self.cont.locked

    def test_lock_is_idempotent(self):
        self.cont.lock()
        assert self.cont.locked

    def test_registrations_are_ignored_after_lock(self):
        self.cont.register_value("late_value", 1)
        self.cont.register_singleton("late_singleton", lambda: 2)
        self.cont.register_instance("late_instance", lambda: 3)

        assert self.cont.get("late_value", True) is NOT_FOUND
        assert self.cont.get("late_singleton", True) is NOT_FOUND
        assert self.cont.get("late_instance", True) is NOT_FOUND

    def test_overwrites_are_ignored_after_lock(self):
        self.cont.register_value("config", {"env": "dev"})
        assert self.cont.get("config") == {"env": "prod"}

    def test_reset_is_ignored_after_lock(self):
        self.cont.reset()
        assert len(self.cont) == 2

    def test_get_keeps_working_after_lock(self):
        logger = self.cont.get("logger")
        assert logger == {"prefix": "prod"}
        assert self.cont.get("logger") is logger

    def test_invalid_registrations_are_ignored_after_lock(self):
        self.cont.register_singleton("broken", 42)
        self.cont.register_value(42, "value")
        assert "broken" not in self.cont


class TestReset(unittest.TestCase):
    def test_reset_clears_registry(self):
        cont = Container()
        cont.register_value("a", 1)
        cont.register_singleton("b", lambda a: a)
        cont.reset()

        assert len(cont) == 0
        assert cont.get("a", True) is NOT_FOUND

    def test_registration_after_reset(self):
        cont = Container()
        cont.register_value("a", 1)
        cont.reset()
        cont.register_value("a", 2)
        assert cont.get("a") == 2

    def test_containers_are_isolated(self):
        first = Container()
        second = Container()
        first.register_value("a", 1)
        first.lock()

        assert second.get("a", True) is NOT_FOUND
        assert not second.locked
