"""Greeting Routes — GET / and GET /apikey, plain-text echoes of configuration."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from tareas_api.services.app_service import AppService, get_app_service

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def get_hello(service: AppService = Depends(get_app_service)):
    return service.get_hello()


@router.get("/apikey", response_class=PlainTextResponse)
async def get_apikey(service: AppService = Depends(get_app_service)):
    return service.get_apikey()
