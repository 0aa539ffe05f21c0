"""
Serverless API handlers.

- GET /api/gpt/completion: explain a pending contract call
- GET /api/lens/profile: default Lens profile of a wallet

Failures are logged and answered with a generic error payload.
"""

import logging
from functools import lru_cache
from typing import Any, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse
from mangum import Mangum
from pydantic import BaseModel

from .clients import ProfileClient
from .config import Settings, load_settings
from .constants import GENERIC_ERROR, NOT_VERIFIED_WARNING
from .errors import TxInsightError
from .pipeline import TransactionExplainer

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class DataResponse(BaseModel):
    data: Any = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_explainer(settings: Settings = Depends(get_settings)) -> TransactionExplainer:
    return TransactionExplainer.from_settings(settings)


def get_profile_client(settings: Settings = Depends(get_settings)) -> ProfileClient:
    return ProfileClient(settings)


def _error_response() -> JSONResponse:
    return JSONResponse(status_code=502, content={'data': {'error': GENERIC_ERROR}})


def _parse_chain_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


app = FastAPI(title="tx-insight")


@app.get("/api/gpt/completion", response_model=DataResponse)
def gpt_completion(
    contract_address: str = Query(..., alias="contractAddress"),
    input_data: str = Query(..., alias="inputData"),
    chain_id: str = Query(..., alias="chainId"),
    explainer: TransactionExplainer = Depends(get_explainer),
):
    parsed_chain_id = _parse_chain_id(chain_id)
    if parsed_chain_id is None:
        logger.info(f"ChainId {chain_id} not supported.")
        return DataResponse(data=NOT_VERIFIED_WARNING)

    try:
        summary = explainer.explain(contract_address, input_data, parsed_chain_id)
    except TxInsightError:
        logger.exception(f"Explanation failed for {contract_address} on chain {chain_id}")
        return _error_response()
    except Exception:
        logger.exception(f"Unexpected failure explaining {contract_address} on chain {chain_id}")
        return _error_response()
    return DataResponse(data=summary)


@app.get("/api/lens/profile", response_model=DataResponse)
def lens_profile(
    wallet_address: str = Query(..., alias="walletAddress"),
    profile_client: ProfileClient = Depends(get_profile_client),
):
    try:
        profile = profile_client.get_default_profile(wallet_address)
    except TxInsightError:
        logger.exception(f"Profile lookup failed for {wallet_address}")
        return _error_response()
    except Exception:
        logger.exception(f"Unexpected failure looking up profile of {wallet_address}")
        return _error_response()
    return DataResponse(data=profile)


handler = Mangum(app)
