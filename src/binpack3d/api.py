"""FastAPI endpoint for the bin packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from binpack3d.catalog import preset_names
from binpack3d.config import configure_logging
from binpack3d.errors import ItemTooLargeError
from binpack3d.io.schemas import PackingRequestSchema, PackingResultSchema
from binpack3d.plan import build_plan

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="binpack3d API",
    description="3D bin packing over a catalog of box sizes",
)


# Plain ``def``: the engine is synchronous and runs in the threadpool.
@app.post("/pack", response_model=PackingResultSchema)
def pack_endpoint(request: PackingRequestSchema) -> PackingResultSchema:
    """
    Pack items into bins from an explicit catalog or a catalog preset.

    Input (request body):
        {
            "catalog_preset": "standard",
            "items": [
                { "id": "A", "width": 20, "height": 100, "depth": 30, "weight": 10, "quantity": 2 }
            ]
        }
    """
    try:
        result = build_plan(request)
        logger.info(f"num_bins={result.num_bins}, num_items={result.num_items}")
        return result
    except ItemTooLargeError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "ITEM_TOO_LARGE", "summary": str(e), "item": e.as_dict()},
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/catalogs")
def catalogs() -> dict[str, Any]:
    """Names of the built-in catalog presets."""
    return {"presets": preset_names()}


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
