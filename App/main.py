"""FastAPI application entry point for the Test Account Registry.

This module wires the account router and a small status route:

- Status page with the application environment and registered environments.
- Registry routes for listing, registering, deregistering and selecting
  test accounts under ``/api/v1/test-accounts``.

The application relies on configuration values provided via environment
variables and initializes logging at import-time.
"""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from App.Api.routes_accounts import router as accounts_router, get_recorder, get_registry
from App.Config.config import settings
from App.Core.registry import AccountRegistry
from App.Services.utility import setup_logging, logging_function, resolve_level
setup_logging(resolve_level(settings.log_level))


app = FastAPI(title="Test Account Registry", version="0.1.0")
app.include_router(accounts_router, prefix="/api/v1/test-accounts", tags=["accounts"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Selections are recorded from the first request on.
get_recorder()
logging_function(f"Test account registry started ({settings.app_env})", level="info")


@app.get("/")
def home(registry: AccountRegistry = Depends(get_registry)):
    """Report the running environment and which account environments exist."""
    return JSONResponse(
        content={
            "status": "ok",
            "app_env": settings.app_env,
            "environments": sorted(registry.environments()),
        }
    )
