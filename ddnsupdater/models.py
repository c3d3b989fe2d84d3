"""Presentation models shared by providers."""

from pydantic import BaseModel, ConfigDict


class HTMLRow(BaseModel):
    """One row of the status table.

    `domain` and `provider` hold trusted HTML snippets (links); `owner` and
    `ip_version` are plain text.
    """

    model_config = ConfigDict(frozen=True)

    domain: str
    owner: str
    provider: str
    ip_version: str
