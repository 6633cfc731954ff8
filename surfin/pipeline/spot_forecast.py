"""Spot forecast pipeline: resolve spot -> fetch -> parse -> render."""

import logging

from surfin.config.schema import SurfinConfig
from surfin.ingest.forecast_parser import parse_forecasts
from surfin.ingest.msw_client import MswClient
from surfin.ingest.spots import Spots
from surfin.models.common import SpotId
from surfin.models.forecast import Forecast
from surfin.ui.render import Output, Rendered, render_forecast

logger = logging.getLogger(__name__)


class SpotNotFoundError(LookupError):
    """Raised when a spot name isn't in the spots mapping."""


class SpotForecastPipeline:
    def __init__(
        self,
        config: SurfinConfig,
        client: MswClient | None = None,
        spots: Spots | None = None,
    ):
        self.config = config
        self._client = client
        self._spots = spots

    @property
    def client(self) -> MswClient:
        if self._client is None:
            self._client = MswClient.from_config(self.config.msw)
        return self._client

    @property
    def spots(self) -> Spots:
        if self._spots is None:
            self._spots = Spots.from_path(self.config.spots_path)
        return self._spots

    def resolve(self, spot: str) -> SpotId:
        """Numeric ids pass straight through; names go via the spots file."""
        if spot.isdigit():
            return int(spot)
        spot_id = self.spots.get_id(spot)
        if spot_id is None:
            raise SpotNotFoundError(f"Unknown spot: {spot}")
        return spot_id

    def fetch(self, spot: str) -> list[Forecast]:
        spot_id = self.resolve(spot)
        raw = self.client.get_forecast(spot_id)
        forecast = parse_forecasts(raw)
        logger.info("Fetched %d forecasts for spot %s (%d)", len(forecast), spot, spot_id)
        return forecast

    def run(self, spot: str, output: Output = Output.TERMINAL) -> Rendered:
        forecast = self.fetch(spot)
        return render_forecast(forecast, output, self.config.layout.to_layout())
