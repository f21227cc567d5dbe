from pydantic import BaseModel, ConfigDict, Field


def is_json_content_type(content_type: str | None) -> bool:
    """True for application/json and any +json media type."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class EndpointReply(BaseModel):
    """Raw outcome of one call to an inference endpoint."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(description="HTTP status returned by the endpoint")
    body: str = Field(default="", description="Decoded response body")
    content_type: str | None = Field(
        default=None,
        description="Value of the Content-Type header, if any"
    )

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300
