from __future__ import annotations

from fastapi import Request

from menu_api.observability.metrics import HitCounter
from menu_api.services.menu_store import MenuStore


def get_menu_store(request: Request) -> MenuStore:
    return request.app.state.menu_store


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.hit_counter
