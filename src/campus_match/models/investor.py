"""Investor / platform user model used for personalization."""

from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for profile loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, ConfigDict, Field, field_validator


class InvestorProfile(BaseModel):
    """
    A platform user as seen by the engine: identity, role and, for investors,
    the interests that drive recommendations and compatibility scores.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    username: str = ""
    full_name: str = Field(default="", alias="fullName")
    bio: str = ""
    location: str = ""

    role: str = Field(default="normal", description="student | investor | normal | admin")
    investor_approval_status: str = Field(
        default="approved",
        alias="investorApprovalStatus",
        description="pending | approved | rejected",
    )

    investment_domains: list[str] = Field(default_factory=list, alias="investmentDomains")
    current_focus: str = Field(default="", alias="currentFocus")
    firm: str = ""
    investor_role: str = Field(default="", alias="investorRole")

    @field_validator("username", "full_name", "bio", "location", "current_focus", "firm", "investor_role", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("investment_domains", mode="before")
    @classmethod
    def _domains_to_list(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [d.strip() for d in value.split(",") if d.strip()]
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(d) for d in value if d is not None]

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @property
    def display_name(self) -> str:
        """Name used when addressing the user; 'there' when anonymous."""
        return self.full_name or self.username or "there"

    @property
    def is_investor(self) -> bool:
        return self.role == "investor"

    @property
    def is_approved_investor(self) -> bool:
        return self.is_investor and self.investor_approval_status == "approved"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "InvestorProfile":
        """Load profile from YAML file. Supports nested (investor section) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        investor = data.get("investor", {})

        def _get(key: str, default=None):
            return investor.get(key, data.get(key, default))

        flat: dict = {
            "id": data.get("id"),
            "username": data.get("username", "investor"),
            "full_name": data.get("full_name", data.get("fullName", "")),
            "bio": data.get("bio", ""),
            "location": data.get("location", ""),
            "role": data.get("role", "investor"),
            "investor_approval_status": _get("approval_status", "approved"),
            "investment_domains": _get("domains") or _get("investment_domains") or [],
            "current_focus": _get("current_focus", ""),
            "firm": _get("firm", ""),
            "investor_role": _get("investor_role", ""),
        }
        return cls.model_validate(flat)
