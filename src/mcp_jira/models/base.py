"""
Base model for Jira API responses.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base class for models built from Jira REST responses.

    Subclasses implement ``from_api_response`` to read the raw JSON and
    ``to_simplified_dict`` to produce the compact form returned by tools.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Serialize the model, dropping unset (None) values."""
        return self.model_dump(exclude_none=True)
