from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Literal, Optional, Tuple

Sentiment = Literal["positive", "negative", "neutral"]
IssueType = Literal["uncertainty", "hesitation"]
OpportunityType = Literal["value_proposition", "competitive_positioning", "objection_handling", "upsell"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class SentimentSegment(_Frozen):
    text: str
    sentiment: Sentiment
    start_time: float
    end_time: float
    speaker: str


class ConfidenceIssue(_Frozen):
    text: str
    issue_type: IssueType
    time: float
    suggestion: str


class MissedOpportunity(_Frozen):
    text: str
    opportunity_type: OpportunityType
    time: float
    suggestion: str


class FillerWordAnalysis(_Frozen):
    total_count: int = Field(0, ge=0)
    by_word: Dict[str, int] = Field(default_factory=dict)
    frequency_per_minute: float = Field(0.0, ge=0)


class AnalysisResult(_Frozen):
    overall: Sentiment = "neutral"
    segments: Tuple[SentimentSegment, ...] = ()
    confidence_issues: Tuple[ConfidenceIssue, ...] = ()
    missed_opportunities: Tuple[MissedOpportunity, ...] = ()
    filler_words: FillerWordAnalysis = Field(default_factory=FillerWordAnalysis)
    summary: str = ""


class AnalyzeRequest(BaseModel):
    text: Optional[str] = None
    rep_name: Optional[str] = None
    customer_name: Optional[str] = None
    duration_seconds: Optional[float] = None
    call_id: Optional[str] = None
