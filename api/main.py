from __future__ import annotations

import logging
import os
import uuid
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Header, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from contracts.errors import InvalidConfiguration, JurisdictionNotFound
from jurisdiction_repository import InMemoryJurisdictionRepository, load_default_repository
from orchestrator import generate

load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("POLICYBRIEF_LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class BriefRequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Validated by normalize_configuration so bad values map to 400.
    country_code: Any = Field(default="", alias="countryCode")
    city_name: Optional[str] = Field(default=None, alias="cityName")
    has_drones: bool = Field(default=False, alias="hasDrones")
    has_minors: bool = Field(default=False, alias="hasMinors")
    has_foreign_crew: bool = Field(default=False, alias="hasForeignCrew")
    shoot_date: Optional[str] = Field(default=None, alias="shootDate")
    strict_city: Optional[bool] = Field(default=None, alias="strictCity")


def _bool_env(name: str, default: bool = False) -> bool:
    v = os.getenv(name, "")
    if v == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def get_repository() -> InMemoryJurisdictionRepository:
    return load_default_repository()


app = FastAPI(title="Policy Brief API", version="0.1.0")


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    response = await call_next(request)
    response.headers["x-request-id"] = rid
    return response


def _require_api_key(x_api_key: Optional[str]) -> None:
    required = os.getenv("POLICYBRIEF_API_KEY", "")
    if not required:
        # no key set => auth disabled (dev-friendly)
        return
    if not x_api_key or x_api_key != required:
        raise HTTPException(status_code=401, detail="Unauthorized")


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/v1/jurisdictions")
def list_jurisdictions(
    x_api_key: Optional[str] = Header(default=None),
    repository: InMemoryJurisdictionRepository = Depends(get_repository),
) -> dict[str, Any]:
    _require_api_key(x_api_key)
    return {
        "countries": [{"code": code, "name": name} for code, name in repository.available_countries()],
    }


@app.get("/v1/jurisdictions/{country_code}/cities")
def list_cities(
    country_code: str,
    x_api_key: Optional[str] = Header(default=None),
    repository: InMemoryJurisdictionRepository = Depends(get_repository),
) -> dict[str, Any]:
    _require_api_key(x_api_key)
    try:
        record = repository.lookup_country(country_code)
    except JurisdictionNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.reason) from exc
    return {"country_code": record.country_code, "cities": list(repository.available_cities(record.country_code))}


@app.post("/v1/briefs")
def create_brief(
    request: Request,
    body: BriefRequestBody,
    x_api_key: Optional[str] = Header(default=None),
    repository: InMemoryJurisdictionRepository = Depends(get_repository),
) -> dict[str, Any]:
    _require_api_key(x_api_key)

    strict_city = body.strict_city if body.strict_city is not None else _bool_env("POLICYBRIEF_STRICT_CITY", False)
    try:
        brief = generate(body.model_dump(exclude={"strict_city"}), repository, strict_city=strict_city)
    except InvalidConfiguration as exc:
        raise HTTPException(status_code=400, detail=exc.reason) from exc
    except JurisdictionNotFound as exc:
        logger.info("No policy data for %s", exc.country_code)
        raise HTTPException(status_code=404, detail=exc.reason) from exc

    out = brief.to_dict()
    out["request_id"] = getattr(request.state, "request_id", None)
    return out
