"""Help request models."""

from typing import List, NewType, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

RequestId = NewType("RequestId", int)


class HelpRequest(BaseModel):
    """A help request, created and mutated outside the chat subsystem."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str = Field(default="", validation_alias=AliasChoices("description", "desc"))
    city: str = ""
    requester_id: str = Field(validation_alias=AliasChoices("requester_id", "requesterId"))
    taker_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("taker_id", "takerId"))  # unset until a taker commits

    @property
    def request_id(self) -> RequestId:
        return RequestId(self.id)

    def summary(self, limit: int = 100) -> str:
        """Short description shown above a conversation."""
        if len(self.description) <= limit:
            return self.description
        return self.description[:limit] + "..."


class HelpRequestListResponse(BaseModel):
    """Response containing all known help requests."""
    requests: List[HelpRequest]
