"""Tests for the spot forecast pipeline."""

import json
from pathlib import Path

import pytest

from surfin.config.schema import LayoutConfig, SurfinConfig
from surfin.ingest.msw_client import MswClientError
from surfin.ingest.spots import Spots, SpotsError
from surfin.pipeline.spot_forecast import SpotForecastPipeline, SpotNotFoundError
from surfin.ui.render import Output


class StubClient:
    def __init__(self, records: list[dict] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls: list[int] = []

    def get_forecast(self, spot_id: int) -> list[dict]:
        self.calls.append(spot_id)
        if self.error is not None:
            raise self.error
        return self.records


@pytest.fixture
def raw_forecast(fixtures_dir: Path) -> list[dict]:
    with open(fixtures_dir / "msw_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def pipeline(raw_forecast: list[dict]) -> SpotForecastPipeline:
    return SpotForecastPipeline(
        SurfinConfig(),
        client=StubClient(raw_forecast),
        spots=Spots({"ormond-beach": 4203}),
    )


class TestResolve:
    def test_numeric(self, pipeline: SpotForecastPipeline):
        assert pipeline.resolve("616") == 616

    def test_name(self, pipeline: SpotForecastPipeline):
        assert pipeline.resolve("Ormond Beach") == 4203

    def test_unknown(self, pipeline: SpotForecastPipeline):
        with pytest.raises(SpotNotFoundError):
            pipeline.resolve("atlantis")

    def test_numeric_skips_spots_file(self, tmp_path: Path):
        config = SurfinConfig(spots_path=str(tmp_path / "missing.json"))
        assert SpotForecastPipeline(config, client=StubClient()).resolve("42") == 42

    def test_missing_spots_file(self, tmp_path: Path):
        config = SurfinConfig(spots_path=str(tmp_path / "missing.json"))
        with pytest.raises(SpotsError):
            SpotForecastPipeline(config, client=StubClient()).resolve("lowers")


class TestRun:
    def test_fetch_parses_records(self, pipeline: SpotForecastPipeline):
        forecast = pipeline.fetch("ormond-beach")
        assert len(forecast) == 3
        assert pipeline.client.calls == [4203]

    def test_run_terminal(self, pipeline: SpotForecastPipeline):
        rendered = pipeline.run("ormond-beach")
        assert rendered.output == Output.TERMINAL
        assert "Sat Oct 19" in rendered.body

    def test_run_html(self, pipeline: SpotForecastPipeline):
        rendered = pipeline.run("4203", Output.HTML)
        assert rendered.body.startswith("<!DOCTYPE html>")

    def test_uses_configured_layout(self, raw_forecast: list[dict]):
        config = SurfinConfig(layout=LayoutConfig(viewport_width=60))
        pipeline = SpotForecastPipeline(config, client=StubClient(raw_forecast))
        body = pipeline.run("4203").body
        first_line = body.split("\n")[0]
        assert len(first_line) == 60

    def test_client_error_propagates(self):
        pipeline = SpotForecastPipeline(
            SurfinConfig(), client=StubClient(error=MswClientError("HTTP 500", 500))
        )
        with pytest.raises(MswClientError):
            pipeline.run("4203")
