from __future__ import annotations

import logging

import requests
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vtc_registry.api.routes.lookup import router as lookup_router
from vtc_registry.errors import RegistryError


logger = logging.getLogger("vtc.api")


def health():
    return {"status": "ok"}


def _error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": str(exc)})


app = FastAPI(title="VTC registry")
app.include_router(lookup_router)


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError):
    logger.info("%s %s -> %s", request.method, request.url.path, exc)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"message": message or "invalid request"})


@app.exception_handler(requests.exceptions.RequestException)
async def transport_error_handler(request: Request, exc: requests.exceptions.RequestException):
    logger.warning("%s %s transport failure: %s", request.method, request.url.path, exc)
    return _error_response(exc)


@app.get("/health")
def health_route():
    return health()
