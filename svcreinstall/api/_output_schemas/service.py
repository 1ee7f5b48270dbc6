"""Output schemas for service commands."""

from pydantic import BaseModel, Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ServiceEntryOutput(BaseModel):
    name: str = Field(..., description="Service name registered with the SCM")
    display_name: str = Field(..., description="Service display name")
    status: str = Field(..., description="Current service status")


class ServiceFindOutput(BaseOutputSchema):
    """Output schema for service find command."""

    hint: str = Field(..., description="Name fragment that was searched for")
    services: list[ServiceEntryOutput] = Field(..., description="Matching services, empty list if none")
    count: int = Field(..., description="Number of matching services")


schema_registry.register_output_schema("service", "find", ServiceFindOutput)
