"""
Bearer Token Authentication Service
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.booking.app.interface.i_session_query_repo import ISessionQueryRepo


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = 7

    def create_jwt_token(self, user_id: int) -> str:
        payload = {
            'userId': user_id,
            'exp': datetime.now(timezone.utc) + timedelta(days=self.token_expire_days),
            'iat': datetime.now(timezone.utc),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return payload
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    async def authenticate_token(
        self, session_query_repo: ISessionQueryRepo, token: Optional[str]
    ) -> int:
        """Resolve the user id behind `token`; the token must belong to a stored session."""
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('userId')
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise AuthenticationError('Invalid token')

        # A signed token is only valid while its session exists
        if not await session_query_repo.exists(user_id=user_id, token=token):
            raise AuthenticationError('Session not found')

        return user_id
