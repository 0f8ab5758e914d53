class InvalidTransition(ValueError):
    """Lo stato può solo avanzare: not_started -> submitted -> graded, pending -> graded."""


class LoginSuperseded(RuntimeError):
    """Un tentativo di login più recente per lo stesso client ha preso il posto di questo."""
