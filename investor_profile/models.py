# investor_profile/models.py
from __future__ import annotations
from typing import Dict, Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class AllocationSlice(BaseModel):
    """One line of a profile's suggested allocation."""
    label: str
    value: int = Field(ge=0, le=100, description="Percentage of the allocation")


class InvestorProfileAnalysis(BaseModel):
    """Static description of an investor profile band."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    description: str
    traits: List[str]
    suitable_investments: List[str] = Field(alias="suitableInvestments")
    risks_to_consider: List[str] = Field(alias="risksToConsider")
    time_horizon: str = Field(alias="timeHorizon")
    allocation: List[AllocationSlice]


class InvestorProfileRecord(BaseModel):
    """
    Profile snapshot persisted for a user.

    Dumped with camelCase keys (``model_dump(by_alias=True)``) to match
    the document store layout.
    """
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    profile_type: Literal["conservative", "balanced", "growth"] = Field(alias="profileType")
    analysis: InvestorProfileAnalysis
    investment_style_insights: List[str] = Field(default_factory=list, alias="investmentStyleInsights")
    answers: Dict[str, Dict[str, Any]]
