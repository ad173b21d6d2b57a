import pytest

from davprops import DAVEvent
from davprops import DAVEventListener


class TestDAVEvent:
    def test_options_become_attributes(self):
        event = DAVEvent("sync-finished", href="/cal/", changed=3)
        assert event.type == "sync-finished"
        assert event.href == "/cal/"
        assert event.changed == 3

    def test_repr(self):
        assert repr(DAVEvent("x")) == "DAVEvent('x')"
        assert repr(DAVEvent("x", a=1)) == "DAVEvent('x', a=1)"

    def test_equality(self):
        assert DAVEvent("x", a=1) == DAVEvent("x", a=1)
        assert DAVEvent("x", a=1) != DAVEvent("x", a=2)

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(DAVEvent("x"))

    def test_type_option_wins(self):
        event = DAVEvent("x", type="y", a=1)
        assert event.type == "y"
        assert event.a == 1


class TestDAVEventListener:
    def test_dispatch(self):
        seen = []
        target = DAVEventListener()
        target.add_event_listener("update", seen.append)
        event = DAVEvent("update")
        target.dispatch_event("update", event)
        target.dispatch_event("update", event)
        target.dispatch_event("delete", DAVEvent("delete"))
        assert seen == [event, event]

    def test_once(self):
        seen = []
        target = DAVEventListener()
        target.add_event_listener("update", lambda e: seen.append("once"), once=True)
        target.dispatch_event("update", DAVEvent("update"))
        target.dispatch_event("update", DAVEvent("update"))
        assert seen == ["once"]

    def test_once_listeners_run_first(self):
        seen = []
        target = DAVEventListener()
        target.add_event_listener("update", lambda e: seen.append("always"))
        target.add_event_listener("update", lambda e: seen.append("once"), once=True)
        target.dispatch_event("update", DAVEvent("update"))
        assert seen == ["once", "always"]

    def test_remove(self):
        seen = []
        target = DAVEventListener()
        target.add_event_listener("update", seen.append)
        target.remove_event_listener("update", seen.append)
        target.remove_event_listener("update", seen.append)
        target.remove_event_listener("never-registered", seen.append)
        target.dispatch_event("update", DAVEvent("update"))
        assert seen == []
