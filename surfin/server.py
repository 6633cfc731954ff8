"""HTTP front end: serve forecasts as terminal text to curl, HTML to browsers."""

import logging

from fastapi import FastAPI, Header, HTTPException
from fastapi.responses import PlainTextResponse, Response

from surfin.config.schema import SurfinConfig
from surfin.ingest.forecast_parser import ForecastParseError
from surfin.ingest.msw_client import MswClientError
from surfin.ingest.spots import SpotsError
from surfin.pipeline.spot_forecast import SpotForecastPipeline, SpotNotFoundError
from surfin.ui.errors import RenderError
from surfin.ui.render import Output, Rendered, render
from surfin.ui.spots_view import draw_spots

logger = logging.getLogger(__name__)

# Command line clients get ANSI text; everything else gets HTML
TERMINAL_AGENTS = ("curl", "wget", "httpie")

USAGE = "Surf forecasts for the terminal. Try: curl {host}/ormond-beach\n"


def choose_output(user_agent: str | None, requested: Output | None = None) -> Output:
    if requested is not None:
        return requested
    if user_agent and user_agent.lower().startswith(TERMINAL_AGENTS):
        return Output.TERMINAL
    return Output.HTML


def _response(rendered: Rendered) -> Response:
    return Response(content=rendered.body, media_type=rendered.media_type)


def create_app(
    config: SurfinConfig | None = None,
    pipeline: SpotForecastPipeline | None = None,
) -> FastAPI:
    config = config or SurfinConfig()
    pipeline = pipeline or SpotForecastPipeline(config)
    layout = config.layout.to_layout()

    app = FastAPI(title="surfin", version="0.1.0")

    @app.get("/", response_class=PlainTextResponse)
    def index(host: str | None = Header(default=None)):
        return USAGE.format(host=host or f"{config.server.host}:{config.server.port}")

    @app.get("/spots")
    def list_spots(
        format: Output | None = None,
        user_agent: str | None = Header(default=None),
    ):
        try:
            spots = pipeline.spots
        except SpotsError as e:
            logger.error("Spots unavailable: %s", e)
            raise HTTPException(status_code=500, detail="Spot list unavailable") from e
        output = choose_output(user_agent, format)
        return _response(render(draw_spots(spots.items(), layout), output))

    @app.get("/{spot}")
    def spot_forecast(
        spot: str,
        format: Output | None = None,
        user_agent: str | None = Header(default=None),
    ):
        output = choose_output(user_agent, format)
        try:
            rendered = pipeline.run(spot, output)
        except SpotNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except SpotsError as e:
            logger.error("Spots unavailable: %s", e)
            raise HTTPException(status_code=500, detail="Spot list unavailable") from e
        except (MswClientError, ForecastParseError) as e:
            logger.error("Upstream forecast failed for %s: %s", spot, e)
            raise HTTPException(status_code=502, detail="Forecast unavailable") from e
        except RenderError as e:
            logger.exception("Render failed for %s", spot)
            raise HTTPException(status_code=500, detail="Forecast could not be rendered") from e
        return _response(rendered)

    return app
