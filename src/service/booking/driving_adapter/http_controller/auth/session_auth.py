from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.service.booking.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    session_query_repo: ISessionQueryRepo = Depends(Provide[Container.session_query_repo]),
) -> int:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span('auth.get_current_user_id'):
        token = credentials.credentials if credentials else None
        return await jwt_auth.authenticate_token(session_query_repo, token)
