"""Authorization for request-scoped chats."""

from enum import Enum

from ..models.identity import Role, UserIdentity
from ..models.request import HelpRequest


class AccessDecision(Enum):
    """Outcome of an authorization check."""
    ALLOW = "allow"
    DENY = "deny"

    @property
    def allowed(self) -> bool:
        return self is AccessDecision.ALLOW


def authorize(identity: UserIdentity, request: HelpRequest) -> AccessDecision:
    """Allow only the request's requester and its assigned taker."""
    if identity.role is Role.REQUESTER:
        participant_id = request.requester_id
    elif identity.role is Role.TAKER:
        participant_id = request.taker_id
    else:
        return AccessDecision.DENY

    if participant_id is not None and identity.user_id == participant_id:
        return AccessDecision.ALLOW
    return AccessDecision.DENY


class AccessController:
    """Gates chat visibility and write access.

    Holds no state, so every call sees the current identity and request.
    """

    def authorize(self, identity: UserIdentity, request: HelpRequest) -> AccessDecision:
        return authorize(identity, request)
