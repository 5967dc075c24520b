# growth_tracker/api/routing.py
import json
from decimal import Decimal
from typing import Any, Callable

from fastapi import Request, Response
from fastapi.routing import APIRoute


class DecimalJSONRequest(Request):
    """Request whose JSON body keeps fractional numbers as Decimal."""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            self._json = json.loads(body, parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    """
    Route class for endpoints that validate numbers themselves.

    Hours are checked against the 0.25 grid on the literal the client sent,
    so the body must not pass through binary floats first.
    """

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def custom_route_handler(request: Request) -> Response:
            request = DecimalJSONRequest(request.scope, request.receive)
            return await original_route_handler(request)

        return custom_route_handler
