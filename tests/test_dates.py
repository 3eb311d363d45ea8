from app.utils import dates


def test_now_in_tz_defaults_to_campus_timezone():
    assert dates.now_in_tz().timezone_name == "America/Los_Angeles"


def test_now_in_tz_honours_timezone_override(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
    assert dates.now_in_tz().timezone_name == "Europe/Berlin"


def test_current_year_follows_site_clock(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "UTC")
    assert dates.current_year() == dates.now_in_tz().year
