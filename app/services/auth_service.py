import asyncio
import itertools
import logging
from typing import Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.database.session_store import Session, SessionStore
from app.schemas.auth import LoginRequest
from app.schemas.context import UserContext
from app.services.errors import LoginSuperseded

logger = logging.getLogger("portal.auth")

bearer_scheme = HTTPBearer(auto_error=False)


class LoginCoordinator:
    """
    Login senza verifica delle credenziali, con ritardo artificiale.

    Ogni tentativo riceve un token di richiesta crescente per client: al termine
    del ritardo solo il tentativo più recente apre una sessione, quelli superati
    vengono scartati.
    """

    def __init__(self, store: SessionStore, delay_seconds: float = 1.0):
        self.store = store
        self.delay_seconds = delay_seconds
        self._counter = itertools.count(1)
        self._latest: Dict[str, int] = {}

    def begin(self, client_key: str) -> int:
        request_token = next(self._counter)
        self._latest[client_key] = request_token
        return request_token

    def is_current(self, client_key: str, request_token: int) -> bool:
        return self._latest.get(client_key) == request_token

    async def login(self, data: LoginRequest) -> Optional[Session]:
        if not data.username or not data.password:
            logger.info("Login ignorato: username o password mancanti")
            return None

        client_key = data.clientId or data.username
        request_token = self.begin(client_key)
        try:
            await asyncio.sleep(self.delay_seconds)
            if not self.is_current(client_key, request_token):
                logger.info("Login %d per %s superato da un tentativo più recente", request_token, client_key)
                raise LoginSuperseded(f"Login attempt for {client_key} was superseded")
        finally:
            # anche se la richiesta viene cancellata durante l'attesa
            if self.is_current(client_key, request_token):
                del self._latest[client_key]

        session = self.store.open(UserContext(user_id=data.username, role=data.role))
        logger.info("Sessione aperta per %s (%s)", data.username, data.role.value)
        return session


def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Session:
    store: Optional[SessionStore] = getattr(request.app.state, "session_store", None)
    if store is None:
        raise RuntimeError("Session store non inizializzato")
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    session = store.get(credentials.credentials)
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired session")
    return session


class AuthService:

    @staticmethod
    def get_current_user(session: Session = Depends(get_current_session)) -> UserContext:
        return session.user
