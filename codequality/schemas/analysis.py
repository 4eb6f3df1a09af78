"""Code analysis schemas."""

from pydantic import BaseModel, ConfigDict, Field

from codequality.analyzers.diagnostic_analyzer import AnalysisOptions, IssueSeverity, IssueType


class AnalysisOptionsRequest(BaseModel):
    """Rule group switches."""

    check_security: bool = True
    check_performance: bool = True
    check_maintainability: bool = True
    check_complexity: bool = True

    def to_options(self) -> AnalysisOptions:
        return AnalysisOptions(**self.model_dump())


class AnalysisRequest(BaseModel):
    """Code analysis request model."""

    code: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    options: AnalysisOptionsRequest = Field(default_factory=AnalysisOptionsRequest)


class IssueResponse(BaseModel):
    """Diagnostic issue response model."""

    model_config = ConfigDict(from_attributes=True)

    kind: IssueType
    severity: IssueSeverity
    message: str
    line: int
    column: int
    rule_id: str
    remediation: str | None = None


class CodeMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    complexity: int
    maintainability_index: int
    technical_debt: int
    code_smells: int
    duplicate_lines: int
    lines_of_code: int


class AnalysisResultResponse(BaseModel):
    """Code analysis response model."""

    model_config = ConfigDict(from_attributes=True)

    findings: list[IssueResponse]
    metrics: CodeMetricsResponse
    score: int = Field(..., ge=0, le=100)
    suggestions: list[str]
