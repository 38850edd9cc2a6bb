# --- Crunchem: Calculator Catalog API (FastAPI) -------------------------------
# Purpose: Serve the calculator registry (browse, filter, search), run one
# calculator per request through the runner funnel, and persist the UI
# preferences (favorites, dark mode, sidebar).
# ------------------------------------------------------------------------------

from __future__ import annotations
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from crunchem.catalog import ALL_CATEGORIES, CATEGORIES, get_catalog
from crunchem.preferences import PreferenceStore
from crunchem.runner import run_calculator
from crunchem.selector import get_calculators_by_category, score_calculators, search_calculators

# Load .env for external configuration (log level, preferences path)
load_dotenv()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logging.basicConfig(level=LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Crunchem Calculator API")

# Registry is validated on first use; a bad record stops startup here
_catalog = get_catalog()
_preferences = PreferenceStore.load()

# ----------------------------- Schemas ----------------------------------------
class CalculateRequest(BaseModel):
    # Raw form values keyed by input id; coerced per field by the runner.
    inputs: Dict[str, Any] = Field(default_factory=dict)

class PreferencesPatch(BaseModel):
    # Partial update; omitted flags are left as they are.
    dark_mode: Optional[bool] = None
    sidebar_collapsed: Optional[bool] = None


def _require(calculator_id: str):
    calc = _catalog.get(calculator_id)
    if calc is None:
        raise HTTPException(status_code=404, detail=f"Unknown calculator: {calculator_id}")
    return calc


def _preferences_payload() -> Dict[str, Any]:
    return _preferences.state.model_dump()

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/categories")
def list_categories():
    """Sidebar listing: "All" first, then every category in display order with its count."""
    counts = _catalog.category_counts()
    items = [{"name": ALL_CATEGORIES, "count": len(_catalog.calculators)}]
    items += [{"name": name, "count": counts[name]} for name in CATEGORIES]
    return {"items": items}

@app.get("/calculators")
def list_calculators(category: str = ALL_CATEGORIES, q: str = "", explain: bool = False):
    """
    Browse the registry.
    - `category` narrows by exact category name ("All" keeps everything).
    - `q` then searches within that subset, best match first.
    - `explain` adds the per-field match breakdown for the query.
    """
    subset = get_calculators_by_category(category, _catalog.calculators)
    found = search_calculators(q, subset)
    payload: Dict[str, Any] = {"count": len(found), "items": [c.summary() for c in found]}
    if explain and q.strip():
        payload["scores"] = [vars(s) for s in score_calculators(q, subset)]
    return payload

@app.get("/calculators/{calculator_id}")
def get_calculator(calculator_id: str):
    calc = _require(calculator_id)
    detail = calc.to_dict()
    detail["favorite"] = _preferences.is_favorite(calculator_id)
    return detail

@app.post("/calculators/{calculator_id}/calculate")
def calculate(calculator_id: str, req: CalculateRequest):
    """
    Run one calculator.
    Input mistakes come back as HTTP 200 with ok=false and error_kind="user_input",
    so the form can show the message in place.
    """
    _require(calculator_id)
    res = run_calculator(calculator_id, req.inputs, _catalog)
    return res.to_dict()

@app.get("/preferences")
def get_preferences():
    return _preferences_payload()

@app.post("/preferences/favorites/{calculator_id}")
def toggle_favorite(calculator_id: str):
    _require(calculator_id)
    favorite = _preferences.toggle_favorite(calculator_id)
    logger.info("Favorite %s -> %s", calculator_id, favorite)
    return {"calculator_id": calculator_id, "favorite": favorite, **_preferences_payload()}

@app.patch("/preferences")
def update_preferences(patch: PreferencesPatch):
    if patch.dark_mode is not None:
        _preferences.set_dark_mode(patch.dark_mode)
    if patch.sidebar_collapsed is not None:
        _preferences.set_sidebar_collapsed(patch.sidebar_collapsed)
    return _preferences_payload()
