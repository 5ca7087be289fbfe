from pydantic import BaseModel, Field

from mcp_introspection.models.introspection_config import Introspection


class Config(BaseModel):
    """Server configuration document.

    Only the ``introspection`` section is owned by this package; other
    sections of the host's config file are ignored.
    """

    introspection: Introspection = Field(
        default=Introspection(),
        description="Introspection tool configuration",
    )
