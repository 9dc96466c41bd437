from pydantic import BaseModel, ConfigDict


class ReviewRequest(BaseModel):
    # Review content is free-form; the server adds the timestamp.
    model_config = ConfigDict(extra="allow")
