from __future__ import annotations

from fastapi import APIRouter, Request, Response
from starlette.datastructures import QueryParams

from messenger_relay.api.deps import ActionRouterDep, CredentialsDep, UoWDep
from messenger_relay.api.v1.encoder import encode_result
from messenger_relay.application.dto.action import ActionRequest

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def read_params(request: Request) -> QueryParams:
    """Url-encoded parameters from the query string, or from the body when it is empty."""
    if request.url.query:
        return request.query_params
    body = await request.body()
    return QueryParams(body.decode("utf-8", errors="replace"))


def build_router(prefix: str) -> APIRouter:
    """Route every method on every path under prefix to the action router."""
    router = APIRouter(prefix=prefix, tags=["messenger"])

    @router.api_route("{rest:path}", methods=ALL_METHODS, include_in_schema=False)
    async def messenger_api(
        request: Request,
        uow: UoWDep,
        action_router: ActionRouterDep,
        credentials: CredentialsDep,
    ) -> Response:
        params = await read_params(request)
        result = await action_router.dispatch(
            ActionRequest(method=request.method, params=params, credentials=credentials),
            uow,
        )
        return encode_result(result)

    return router
