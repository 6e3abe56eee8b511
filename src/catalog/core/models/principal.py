"""Authenticated caller identity."""

from pydantic import BaseModel, Field


class Principal(BaseModel):
    """Identity extracted from a verified bearer token."""

    subject: str = Field(description="Value of the 'sub' claim")
    roles: list[str] = Field(default_factory=list, description="Raw roles claim")
    authorities: frozenset[str] = Field(
        default_factory=frozenset, description="Roles with the role prefix applied"
    )
    claims: dict = Field(default_factory=dict, description="All verified claims")

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities
