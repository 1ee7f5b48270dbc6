"""Output schema for version command."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class VersionOutput(BaseOutputSchema):
    """Output schema for version command."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Git commit SHA (short), empty string if not available")
    full_version: str = Field(..., description="Full version string (version + git_sha if available)")


schema_registry.register_output_schema("version", "version", VersionOutput)
