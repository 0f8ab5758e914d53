from fastapi import Request
from app.database.session_store import SessionStore
from app.services.auth_service import LoginCoordinator

def get_session_store(request: Request) -> SessionStore:
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        raise RuntimeError("Session store non inizializzato")
    return store

def get_login_coordinator(request: Request) -> LoginCoordinator:
    coordinator = getattr(request.app.state, "login_coordinator", None)
    if coordinator is None:
        raise RuntimeError("Login coordinator non inizializzato")
    return coordinator
