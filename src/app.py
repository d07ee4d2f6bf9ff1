"""Notifier admin API.

Serves template management, user channel preferences and the dispatch
audit read models. Every request under /notifications runs inside the
notifier domain context.

Run with:
    uvicorn src.app:app --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import notifier.routing  # noqa: F401  (load the package before init() traverses its submodules)
from notifier.domain import notifier
from notifier.utils.logging import configure_logging

# PROTEAN_ENV picks the domain.toml overlay. Outside "production" the
# projectors run inside the unit of work; in production the Engine
# started by server.py runs them.
configure_logging()
notifier.init()

from notifier.api.routes import router as notifier_router  # noqa: E402

app = FastAPI(
    title="Notifier API",
    description="Booking notification dispatch: templates, preferences and delivery audit",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def notifier_context(request: Request, call_next):
    """Push the notifier domain context for API requests."""
    if not request.url.path.startswith(notifier_router.prefix):
        return await call_next(request)
    with notifier.domain_context():
        return await call_next(request)


app.include_router(notifier_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": notifier.name})
