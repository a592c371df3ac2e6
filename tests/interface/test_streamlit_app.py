"""Tests for the Streamlit app module."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.models import InsightError, InsightErrorKind, InsightOk


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page

    def selectbox(self, _label, options):
        assert self.page in options
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Dashboard") -> None:
        self.config_kwargs = None
        self.title_text = None
        self.errors: list[str] = []
        self.infos: list[str] = []
        self.markdowns: list[str] = []
        self.sidebar = _FakeSidebar(page)

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def error(self, text: str):
        self.errors.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def markdown(self, text: str):
        self.markdowns.append(text)


def test_parse_amount_reports_invalid_input(monkeypatch):
    """Invalid amounts should surface an error and return None."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    assert app._parse_amount("12.5") == Decimal("12.5")
    assert app._parse_amount("abc") is None
    assert len(fake_st.errors) == 1


def test_parse_month_normalizes_or_reports_invalid_input(monkeypatch):
    """Month fields should normalize to YYYY-MM or report an error."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    assert app._parse_month("2025-9") == "2025-09"
    assert app._parse_month(" 2025-11 ") == "2025-11"
    assert app._parse_month("2025-13") is None
    assert app._parse_month("") is None
    assert len(fake_st.errors) == 2


def test_render_insight_result_by_outcome(monkeypatch):
    """Successes render markdown, errors and stale results are reported."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_insight_result(InsightOk("Nice work."))
    app._render_insight_result(
        InsightError(InsightErrorKind.MISSING_CREDENTIAL, "No key")
    )
    app._render_insight_result(None)

    assert fake_st.markdowns == ["Nice work."]
    assert fake_st.errors == ["No key"]
    assert len(fake_st.infos) == 1


def test_main_routes_to_selected_page(monkeypatch):
    """main should configure the page and call the selected renderer."""
    fake_st = _FakeStreamlit(page="Debts")
    store = object()
    render_debts = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_store", lambda: store)
    monkeypatch.setattr(app, "_render_debts", render_debts)

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.title_text == "Finance Dashboard"
    render_debts.assert_called_once_with(store)


def test_main_settings_page_skips_store(monkeypatch):
    """The settings page should not load the financial store."""
    fake_st = _FakeStreamlit(page="Settings")
    render_settings = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_render_settings", render_settings)
    monkeypatch.setattr(
        app,
        "_get_store",
        MagicMock(side_effect=AssertionError("store loaded")),
    )

    app.main()

    render_settings.assert_called_once_with()


def test_dispatch_logs_usage(monkeypatch):
    """_dispatch should forward to the store and record the action name."""
    store = MagicMock()
    usage = MagicMock()
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage)

    app._dispatch(store, "action")

    store.dispatch.assert_called_once_with("action")
    usage.info.assert_called_once_with("dispatch str")
