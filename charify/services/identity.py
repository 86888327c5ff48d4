"""Current-session identity supplied by the external authentication flow."""

from functools import lru_cache
from typing import Optional

from ..logging_config import get_logger
from ..models.identity import UserIdentity

logger = get_logger(__name__)


class IdentityContext:
    """Holds the identity of one session.

    The identity is established once and never mutated; ending the session
    discards it. Chat components never read this object directly, they are
    handed the ``UserIdentity`` it returns.
    """

    def __init__(self, identity: Optional[UserIdentity] = None):
        self._identity = identity

    def establish(self, identity: UserIdentity) -> None:
        """Bind the session identity."""
        if self._identity is not None and self._identity != identity:
            raise RuntimeError("Session identity already established")
        self._identity = identity
        logger.info(f"Session established for {identity.user_id} ({identity.role.value})")

    def end_session(self) -> None:
        """Discard the session identity."""
        if self._identity is not None:
            logger.info(f"Session ended for {self._identity.user_id}")
        self._identity = None

    def is_established(self) -> bool:
        return self._identity is not None

    def current(self) -> UserIdentity:
        """Return the session identity."""
        if self._identity is None:
            raise LookupError("No session identity established")
        return self._identity


@lru_cache(maxsize=1)
def get_identity_context() -> IdentityContext:
    """Get the process-wide identity context used by local sessions."""
    return IdentityContext()
