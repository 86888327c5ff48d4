"""Read-only lookup of help requests."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..config import get_settings
from ..logging_config import get_logger
from ..models.request import HelpRequest, RequestId

logger = get_logger(__name__)


class RequestStore:
    """Help request records keyed by id."""

    def __init__(self, requests: Iterable[HelpRequest] = ()):
        self._requests: Dict[RequestId, HelpRequest] = {}
        for request in requests:
            if request.request_id in self._requests:
                raise ValueError(f"Duplicate help request id: {request.id}")
            self._requests[request.request_id] = request

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RequestStore":
        """Load help requests from a JSON array of records."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"Expected a list of help requests in {path}")
        store = cls(HelpRequest.model_validate(record) for record in raw)
        logger.info(f"Loaded {len(store)} help requests from {path}")
        return store

    def __len__(self) -> int:
        return len(self._requests)

    def all(self) -> List[HelpRequest]:
        """Return every request in load order."""
        return list(self._requests.values())

    def lookup(self, request_id: RequestId) -> Optional[HelpRequest]:
        """Return the request, or None when the id is unknown."""
        return self._requests.get(request_id)


@lru_cache(maxsize=1)
def get_request_store() -> RequestStore:
    """Get the global request store."""
    settings = get_settings()

    if not settings.requests_file:
        logger.warning("No help requests file configured, starting with an empty store")
        return RequestStore()

    return RequestStore.from_file(settings.requests_file)
