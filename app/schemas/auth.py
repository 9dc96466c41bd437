from pydantic import BaseModel, ConfigDict


class IdentityClaim(BaseModel):
    """Identity payload supplied by the client after external verification."""

    model_config = ConfigDict(extra="allow")

    email: str
