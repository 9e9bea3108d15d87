# src/leadcalc/adapters/weights_io.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from leadcalc.domain.weights import DEFAULT_MARKET_WEIGHTS, MarketWeights

from .config import config
from .logging_utils import get_logger

logger = get_logger(__name__)


def _resolve(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Weights path is required.")
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Weights file not found: {p}")
    return p


def load_market_weights(path: str | Path) -> MarketWeights:
    """
    Load weight tables from a JSON file.

    Keys left out of the file keep their built-in values, so a file that
    only lists {"industries": {...}} swaps the industry table and nothing
    else.
    """
    p = _resolve(path)
    try:
        data: Any = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as err:
        raise ValueError(f"Weights file is not valid JSON: {p}") from err
    if not isinstance(data, dict):
        raise ValueError(f"Weights file must hold a JSON object: {p}")

    try:
        weights = MarketWeights.model_validate(DEFAULT_MARKET_WEIGHTS.model_dump() | data)
    except ValidationError as err:
        raise ValueError(f"Invalid weights file {p}: {err}") from err

    logger.info(
        "weights_io_load",
        extra={"context": {"path": str(p), "keys": sorted(data)}},
    )
    return weights


def dump_market_weights(weights: MarketWeights, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(weights.model_dump(), indent=2), encoding="utf-8")
    logger.info("weights_io_dump", extra={"context": {"path": str(p)}})
    return p


def resolve_market_weights(path: str | Path | None = None) -> MarketWeights:
    """
    Explicit path first, then LEADCALC_WEIGHTS_PATH, then the built-in tables.
    """
    chosen = path or config.WEIGHTS_PATH
    if not chosen:
        return DEFAULT_MARKET_WEIGHTS
    return load_market_weights(chosen)
