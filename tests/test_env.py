from prom_composite.env import ROLLBACK_ON_FAILURE, get_bool, rollback_on_failure


def test_get_bool_truthy_and_default(monkeypatch):
    monkeypatch.delenv("PROM_COMPOSITE_TEST_FLAG", raising=False)
    assert get_bool("PROM_COMPOSITE_TEST_FLAG") is False
    assert get_bool("PROM_COMPOSITE_TEST_FLAG", True) is True
    for raw in ("1", "true", "YES", " on ", "y"):
        monkeypatch.setenv("PROM_COMPOSITE_TEST_FLAG", raw)
        assert get_bool("PROM_COMPOSITE_TEST_FLAG") is True
    monkeypatch.setenv("PROM_COMPOSITE_TEST_FLAG", "0")
    assert get_bool("PROM_COMPOSITE_TEST_FLAG", True) is False
    monkeypatch.setenv("PROM_COMPOSITE_TEST_FLAG", "")
    assert get_bool("PROM_COMPOSITE_TEST_FLAG", True) is True


def test_rollback_flag(monkeypatch):
    assert rollback_on_failure() is False
    monkeypatch.setenv(ROLLBACK_ON_FAILURE, "true")
    assert rollback_on_failure() is True
