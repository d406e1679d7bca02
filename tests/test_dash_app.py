"""Smoke tests for the assembled Dash application and its page callbacks."""
import json
import sys
from contextvars import copy_context

import dash
import pytest
from dash._callback_context import context_value
from dash._utils import AttributeDict
from dash.exceptions import PreventUpdate


@pytest.fixture(scope="module")
def app():
    from enrichment_monitor.dash_ui.app import create_app

    return create_app()


def _toggle_prop_id(job_id):
    component_id = json.dumps({"job": job_id, "type": "job-toggle"}, sort_keys=True, separators=(",", ":"))
    return f"{component_id}.n_clicks"


def _triggered_by(prop_id, value, func, *args):
    """Call a callback as if Dash had fired it from ``prop_id``."""

    def run():
        context_value.set(AttributeDict(triggered_inputs=[{"prop_id": prop_id, "value": value}]))
        return func(*args)

    return copy_context().run(run)


def _page_module(path):
    for page in dash.page_registry.values():
        if page["path"] == path:
            return sys.modules[page["module"]]
    raise LookupError(path)


class TestCreateApp:

    def test_pages_registered(self, app):
        paths = sorted(page["path"] for page in dash.page_registry.values())
        assert paths == ["/", "/system-logs"]

    def test_title(self, app):
        from enrichment_monitor.config import APP_TITLE

        assert app.title == APP_TITLE

    def test_index_served(self, app):
        response = app.server.test_client().get("/")
        assert response.status_code == 200

    def test_load_jobs_cached(self, app):
        from enrichment_monitor.dash_ui.data.loaders import load_jobs

        with app.server.app_context():
            first = load_jobs()
            second = load_jobs()
        assert [job.id for job in first] == [job.id for job in second]
        assert len(first) == 6


class TestRunsPageCallbacks:

    def test_render_grid_unfiltered_collapsed(self, app):
        page = _page_module("/")
        with app.server.app_context():
            grid, count_text, figure = page.render_grid(None, [])
        _, body = grid.children
        assert len(body.children) == 6
        assert count_text == "Showing 6 jobs (no filters)"
        assert list(figure.data[0].x) == [2, 2, 1, 1]

    def test_render_grid_expanded(self, app):
        page = _page_module("/")
        with app.server.app_context():
            grid, _, _ = page.render_grid(None, ["job-001"])
        _, body = grid.children
        assert [tr.id["job"] for tr in body.children][:3] == ["job-001", "dep-001a", "dep-001b"]

    def test_render_grid_no_match(self, app):
        from enrichment_monitor.dash_ui.state import filter_from_form

        page = _page_module("/")
        payload = filter_from_form("Logs", "failed", None, None)
        with app.server.app_context():
            grid, count_text, _ = page.render_grid(payload, [])
        assert grid.id == "job-grid-empty"
        assert count_text.startswith("Showing 0 jobs")

    def test_status_cards_render_on_page_load(self, app):
        page = _page_module("/")
        with app.server.app_context():
            row = page.update_status_cards("/")
        assert row.children[0].children.children[1].children == "6"

    def test_submit_filters_payload(self, app):
        page = _page_module("/")
        payload = page.submit_filters(1, "Customer", "all", None, None)
        assert payload["dataset_type"] == "Customer"
        assert payload["status"] is None


class TestToggleRowCallback:

    def test_click_expands_row(self, app):
        page = _page_module("/")
        with app.server.app_context():
            result = _triggered_by(_toggle_prop_id("job-001"), 1, page.toggle_row, [1], [])
        assert result == ["job-001"]

    def test_second_click_collapses_row(self, app):
        page = _page_module("/")
        with app.server.app_context():
            result = _triggered_by(_toggle_prop_id("job-001"), 2, page.toggle_row, [2], ["job-001"])
        assert result == []

    def test_redrawn_toggle_does_not_flip_row(self, app):
        # Re-rendered buttons fire with n_clicks=0
        page = _page_module("/")
        with app.server.app_context():
            with pytest.raises(PreventUpdate):
                _triggered_by(_toggle_prop_id("job-001"), 0, page.toggle_row, [0], ["job-001"])

    def test_leaf_click_leaves_state_unchanged(self, app):
        page = _page_module("/")
        with app.server.app_context():
            result = _triggered_by(_toggle_prop_id("job-003"), 1, page.toggle_row, [1], ["job-002"])
        assert result == ["job-002"]


class TestSystemLogsCallback:

    def test_clear_button_empties_buffer(self, app):
        from enrichment_monitor.dash_ui.data.log_buffer import LOG_BUFFER

        page = _page_module("/system-logs")
        LOG_BUFFER.appendleft({"timestamp": "", "level": "INFO", "module": "m", "message": "x"})
        entries, count_text = _triggered_by("logs-clear-btn.n_clicks", 1, page.update_logs, 0, 1, "ALL")
        assert entries == []
        assert count_text.startswith("0 entries")

    def test_level_filter_applied(self, app):
        from enrichment_monitor.dash_ui.data.log_buffer import LOG_BUFFER

        page = _page_module("/system-logs")
        LOG_BUFFER.clear()
        LOG_BUFFER.appendleft({"timestamp": "", "level": "DEBUG", "module": "m", "message": "a"})
        LOG_BUFFER.appendleft({"timestamp": "", "level": "ERROR", "module": "m", "message": "b"})
        entries, _ = _triggered_by("logs-level-filter.value", "WARNING", page.update_logs, 0, None, "WARNING")
        LOG_BUFFER.clear()
        assert [e["message"] for e in entries] == ["b"]


class TestCacheConfig:

    def test_cache_dir_is_versioned(self):
        from enrichment_monitor import __version__
        from enrichment_monitor.config import CACHE_DIR
        from enrichment_monitor.dash_ui.data.cache import cache_config

        cache_dir = cache_config()["CACHE_DIR"]
        assert cache_dir.endswith(f"v{__version__}")
        assert cache_dir != str(CACHE_DIR)
