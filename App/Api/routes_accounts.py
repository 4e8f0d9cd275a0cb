"""Routes exposing the test account registry to a developer menu."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from App.Config.config import settings
from App.Core.broadcasters import default_center
from App.Core.constants import DEFAULT_ENVIRONMENT
from App.Core.registry import AccountRegistry
from App.Models.models import (
    AccountRequest,
    AccountsResponse,
    EnvironmentsResponse,
    SelectResponse,
)
from App.Services.selection import SelectionRecorder
from App.Services.utility import logging_function

router = APIRouter()


def get_registry() -> AccountRegistry:
    """Return the process-wide registry, seeded from settings on first use."""
    if not hasattr(get_registry, "_registry"):
        get_registry._registry = AccountRegistry(
            accounts=settings.test_accounts,
            install_default_broadcaster=settings.install_default_broadcaster,
        )
    return get_registry._registry  # type: ignore


def get_recorder() -> SelectionRecorder:
    """Return the recorder listening on the default notification center."""
    if not hasattr(get_recorder, "_recorder"):
        recorder = SelectionRecorder()
        recorder.attach(default_center)
        get_recorder._recorder = recorder
    return get_recorder._recorder  # type: ignore


@router.get("/environments", response_model=EnvironmentsResponse)
def list_environments(registry: AccountRegistry = Depends(get_registry)):
    return {"environments": sorted(registry.environments())}


@router.get("/accounts", response_model=AccountsResponse)
def list_accounts(environment: Optional[str] = None, registry: AccountRegistry = Depends(get_registry)):
    """Return the accounts of ``environment`` (the default one if omitted)."""
    env = environment or DEFAULT_ENVIRONMENT
    accounts = registry.accounts(env)
    if accounts is None:
        raise HTTPException(404, f"No accounts registered for environment '{env}'")
    return {"environment": env, "accounts": sorted(accounts, key=lambda a: a.username)}


@router.post("/accounts", response_model=EnvironmentsResponse)
def register_account(req: AccountRequest, registry: AccountRegistry = Depends(get_registry)):
    registry.register(req.account, req.environment)
    return {"environments": sorted(registry.environments())}


@router.post("/accounts/deregister", response_model=EnvironmentsResponse)
def deregister_account(req: AccountRequest, registry: AccountRegistry = Depends(get_registry)):
    registry.deregister(req.account, req.environment)
    return {"environments": sorted(registry.environments())}


@router.post("/select", response_model=SelectResponse)
def select_account(req: AccountRequest, registry: AccountRegistry = Depends(get_registry)):
    """Broadcast the selection; broadcaster failures are reported as 500."""
    try:
        selected = registry.select(req.account, req.environment)
    except Exception as e:
        logging_function(f"Account selection failed: {e}", level="error")
        return JSONResponse(content={"error": str(e)}, status_code=500)
    return {"selected": selected}


@router.get("/selection", response_model=AccountRequest)
def latest_selection(environment: Optional[str] = None, recorder: SelectionRecorder = Depends(get_recorder)):
    """Return the most recent selection, optionally restricted to one environment."""
    selection = recorder.for_environment(environment) if environment else recorder.latest()
    if selection is None:
        raise HTTPException(404, "No account has been selected")
    return {"account": selection.account, "environment": selection.environment}
