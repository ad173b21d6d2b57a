import pytest

from davprops.lib import error


class TestDAVError:
    def test_str(self):
        e = error.ResponseError(url="/cal/", reason="gone")
        assert str(e) == "ResponseError at '/cal/', reason gone"

    def test_defaults(self):
        e = error.ResponseError()
        assert e.url is None
        assert e.reason == "no reason"
        assert isinstance(e, error.DAVError)


class TestAttachError:
    def test_attached_attributes(self):
        e = error.AttachError(status=403, body=b"<error/>", url="/cal/")
        assert isinstance(e, error.DAVError)
        assert e.status == 403
        assert e.body == b"<error/>"
        assert e.url == "/cal/"
        assert e.attached == {"status": 403, "body": b"<error/>"}

    def test_raise_and_catch(self):
        with pytest.raises(error.AttachError) as excinfo:
            raise error.AttachError(reason="Forbidden", status=403)
        assert excinfo.value.status == 403
        assert "Forbidden" in str(excinfo.value)


def test_weirdness_logs_a_warning(monkeypatch, caplog):
    monkeypatch.setattr(error, "debugmode", "PRODUCTION")
    error.weirdness("unparseable status line", "garbage")
    assert "Deviation from expectations found" in caplog.text
    assert "unparseable status line : garbage" in caplog.text


def test_error_module_surface():
    for name in ("PropfindError", "NotFoundError", "exception_by_method", "assert_"):
        assert not hasattr(error, name)
