"""FastAPI server — HTTP surface of the fare simulator.

Run with:
    uvicorn fare_simulator.api.server:app --reload --port 8000

Or:
    fare-simulator

Endpoints:
    GET  /health                                    — liveness + uptime
    GET  /api/defaults                              — default parameters
    GET  /api/schema                                — JSON Schema of the parameters
    GET  /api/presets                               — scenario presets
    POST /api/calculate-price                       — price one trip
    POST /api/presets/{preset_id}/calculate-price   — apply a preset, then price
    POST /api/compare-scenarios                     — what-if comparison
    POST /api/sensitivity                           — tornado data (optional custom sweeps)
    POST /api/explain                               — price + plain-text narrative

Request bodies are validated against ``SimulationParameters`` before the
engine runs.  Invalid bodies get a 400 listing the violated constraints.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fare_simulator.api.narrative import generate_narrative
from fare_simulator.config.parameters import DEFAULT_PARAMETERS, SimulationParameters
from fare_simulator.config.presets import (
    SCENARIO_PRESETS,
    PresetNotFoundError,
    ScenarioPreset,
    apply_preset,
    get_preset,
)
from fare_simulator.config.settings import get_settings
from fare_simulator.engine.calculator import compute_price
from fare_simulator.engine.comparison import compare_scenarios
from fare_simulator.engine.sensitivity import NumericParameter, run_sensitivity
from fare_simulator.logging_setup import setup_logging
from fare_simulator.models.results import PriceResult, ScenarioComparison

logger = logging.getLogger(__name__)

_start_time: float = time.monotonic()


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Fare Simulator API",
    version="1.0",
    description=(
        "Educational dynamic-pricing calculator. Send trip and context "
        "parameters, get the total fare and a breakdown of every surcharge "
        "that applied, in the order it was applied."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class SweepSpec(BaseModel):
    """One custom sweep: a numeric parameter and the range to try."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)

    name: str = Field(description="Display name of the bar")
    path: NumericParameter = Field(
        description="Parameter to sweep: distance, hour, weather_severity or traffic_intensity",
    )
    low: float = Field(description="Low end of the sweep, clamped to the parameter's bounds")
    high: float = Field(description="High end of the sweep, clamped to the parameter's bounds")


class SensitivityRequest(BaseModel):
    """Request body for /api/sensitivity."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    params: SimulationParameters
    sweeps: list[SweepSpec] | None = Field(
        default=None,
        description="Optional override of the default sweeps (distance ±50%, weather and "
                    "traffic over their full range). "
                    "Format: [{'name': 'Hora', 'path': 'hour', 'low': 0, 'high': 23}]",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Response models
# ═══════════════════════════════════════════════════════════════════════════

class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Response from /health."""
    status: str
    timestamp: str
    uptime: float


class PresetPriceResponse(_CamelResponse):
    """Response from /api/presets/{preset_id}/calculate-price."""
    params: SimulationParameters
    result: PriceResult


class ExplainResponse(_CamelResponse):
    """Response from /api/explain."""
    result: PriceResult
    narrative: str


# ═══════════════════════════════════════════════════════════════════════════
# Error handlers
# ═══════════════════════════════════════════════════════════════════════════

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed or out-of-range bodies with a 400."""
    errors = exc.errors()
    logger.warning("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(errors))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid parameters", "details": jsonable_encoder(errors)},
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a defect: log it and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Liveness check for deployment platforms."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=time.monotonic() - _start_time,
    )


@app.get("/")
def root():
    """API root — returns a welcome message and pointers."""
    return {
        "name": "Fare Simulator API",
        "version": "1.0",
        "start_here": "POST /api/calculate-price",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/api/defaults")
def get_defaults():
    """Default parameters: a calm midday economy trip. Use as a starting point."""
    return DEFAULT_PARAMETERS.model_dump(by_alias=True)


@app.get("/api/schema")
def get_schema():
    """Full JSON Schema for the request body — types and bounds of every field."""
    return SimulationParameters.model_json_schema(by_alias=True)


@app.get("/api/presets", response_model=list[ScenarioPreset], response_model_exclude_none=True)
def list_presets() -> list[ScenarioPreset]:
    """All scenario presets. Each one only lists the fields it overrides."""
    return list(SCENARIO_PRESETS.values())


@app.post("/api/calculate-price", response_model=PriceResult, response_model_exclude_none=True)
def calculate_price(params: SimulationParameters) -> PriceResult:
    """Price one trip.

    Example request:
    ```json
    {"distance": 10, "vehicleType": "economy", "hour": 8, "isRushHour": true,
     "isHoliday": false, "hasRain": false, "weatherSeverity": 0,
     "trafficIntensity": 30, "hasSpecialEvent": false, "surgeZone": "none"}
    ```
    """
    result = compute_price(params)
    logger.info(
        "Priced %s trip: %.2f (%+.1f%%)",
        params.vehicle_type, result.total_price, result.percentage_change,
    )
    return result


@app.post(
    "/api/presets/{preset_id}/calculate-price",
    response_model=PresetPriceResponse,
    response_model_exclude_none=True,
)
def calculate_preset_price(preset_id: str, params: SimulationParameters) -> PresetPriceResponse:
    """Apply a preset on top of the given parameters, then price the result."""
    try:
        preset = get_preset(preset_id)
    except PresetNotFoundError:
        raise HTTPException(status_code=404, detail=f"Unknown preset: {preset_id}") from None

    merged = apply_preset(params, preset)
    return PresetPriceResponse(params=merged, result=compute_price(merged))


@app.post("/api/compare-scenarios", response_model=ScenarioComparison)
def compare(params: SimulationParameters) -> ScenarioComparison:
    """Reprice the trip with rush hour, rain, traffic, or all surcharges removed."""
    return compare_scenarios(params)


@app.post("/api/sensitivity")
def sensitivity(request: SensitivityRequest) -> dict[str, Any]:
    """Sweep numeric parameters one at a time.

    Without ``sweeps`` the default set runs: distance, weather severity and
    traffic intensity.  Returns tornado chart data: for each parameter, the
    price at its low and high values, sorted by the size of the swing.
    """
    sweeps = None
    if request.sweeps is not None:
        sweeps = [(s.name, s.path, s.low, s.high) for s in request.sweeps]
    result = run_sensitivity(request.params, sweeps)
    return {
        "basePrice": result.base_price,
        "tornadoBars": [
            {
                "paramName": bar.param_name,
                "paramPath": bar.param_path,
                "baseValue": bar.base_value,
                "lowValue": bar.low_value,
                "highValue": bar.high_value,
                "priceAtLow": bar.price_at_low,
                "priceAtHigh": bar.price_at_high,
                "deltaPrice": bar.delta_price,
            }
            for bar in result.bars
        ],
    }


@app.post("/api/explain", response_model=ExplainResponse, response_model_exclude_none=True)
def explain(params: SimulationParameters) -> ExplainResponse:
    """Price the trip and return a plain-text explanation alongside the result."""
    result = compute_price(params)
    return ExplainResponse(result=result, narrative=generate_narrative(result, params))


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.json_logs, settings.environment)
    logger.info("Starting fare simulator on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
