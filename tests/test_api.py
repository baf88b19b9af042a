"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from src.presentation.api import main as api


@pytest.fixture
def client(monkeypatch, service):
    monkeypatch.setattr(api, "service", service)
    return TestClient(api.app)


@pytest.fixture
def broken_client(monkeypatch, missing_file_service):
    monkeypatch.setattr(api, "service", missing_file_service)
    return TestClient(api.app)


def test_health(client):
    """Health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_index_page(client):
    """The page embeds all three charts in their containers."""
    response = client.get("/", params={"width": 1100})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    for container_id in ["barChart", "scatterplot", "lineGraph"]:
        assert f'id="{container_id}"' in html
    assert html.count("<svg") == 3


def test_index_page_without_data(broken_client):
    """A load failure still serves the page, with empty containers."""
    response = broken_client.get("/")

    assert response.status_code == 200
    assert "<svg" not in response.text


def test_chart_svg(client):
    """A single chart is served as an SVG document."""
    response = client.get("/charts/bar.svg")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.count('id="bar-') == 3


def test_chart_unknown(client):
    """Unknown chart names are not found."""
    assert client.get("/charts/pie.svg").status_code == 404


def test_chart_without_data(broken_client):
    """Charts are unavailable when the data cannot be loaded."""
    assert broken_client.get("/charts/line.svg").status_code == 503


def test_monthly_precipitation(client):
    """Monthly totals as JSON, in first-seen order."""
    response = client.get("/monthly-precipitation")

    assert response.status_code == 200
    body = response.json()
    assert [item["month"] for item in body] == ["January", "February", "March"]
    assert body[0]["total_precipitation"] == pytest.approx(2.0)


def test_width_validation(client):
    """Viewport width must be a sensible pixel count."""
    assert client.get("/", params={"width": 10}).status_code == 422
    assert client.get("/charts/line.svg", params={"width": 160}).status_code == 422


def test_chart_renders_off_the_event_loop(client, monkeypatch):
    """Loading and drawing a chart both run in the worker thread pool."""
    offloaded = []
    run_in_threadpool = api.run_in_threadpool

    async def recording_run_in_threadpool(func, *args, **kwargs):
        offloaded.append(func.__name__)
        return await run_in_threadpool(func, *args, **kwargs)

    monkeypatch.setattr(api, "run_in_threadpool", recording_run_in_threadpool)

    response = client.get("/charts/line.svg", params={"width": 900})

    assert response.status_code == 200
    assert offloaded == ["load", "render_chart"]
