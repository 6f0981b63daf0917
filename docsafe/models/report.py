"""Check result and report models.

Match objects mirror the LanguageTool response format. Fields the pipeline
does not use are kept as extras so ``report.json`` carries them, except
fields whose value is null, which are omitted.
"""

import json

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class MatchRule(BaseModel):
    """Rule that produced a match."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    description: str | None = None


class Replacement(BaseModel):
    """A suggested replacement for the matched text."""

    model_config = ConfigDict(extra="allow")

    value: str = ""


class MatchContext(BaseModel):
    """Text snippet surrounding a match."""

    model_config = ConfigDict(extra="allow")

    text: str = ""
    offset: int | None = None
    length: int | None = None


class CheckMatch(BaseModel):
    """One issue reported by the checking service.

    Offsets are relative to the chunk the match was found in, not to the
    full extracted text.
    """

    model_config = ConfigDict(extra="allow")

    message: str = ""
    replacements: list[Replacement] = Field(default_factory=list)
    context: MatchContext | None = None
    offset: int | None = None
    length: int | None = None
    rule: MatchRule | None = None

    @property
    def rule_id(self) -> str | None:
        return self.rule.id if self.rule else None


class CheckResponse(BaseModel):
    """Body returned by the checking service for one request."""

    model_config = ConfigDict(extra="allow")

    matches: list[CheckMatch] | None = None


class ReportSummary(BaseModel):
    """Aggregate figures for a report.

    Attributes:
        file_name: Name of the cleaned document the text came from.
        language: Language code sent to the checking service.
        text_length: Length of the extracted text in characters.
        total_issues: Number of matches.
        by_rule: Match count per rule identifier.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_name: str
    language: str
    text_length: int = Field(ge=0)
    total_issues: int = Field(ge=0)
    by_rule: dict[str, int] = Field(default_factory=dict)


class Report(BaseModel):
    """Proofreading report: summary plus the ordered match sequence."""

    summary: ReportSummary
    matches: list[CheckMatch] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_issue_count(self) -> "Report":
        """Reject reports whose total disagrees with the match list."""
        if self.summary.total_issues != len(self.matches):
            raise ValueError(
                f"totalIssues ({self.summary.total_issues}) does not match "
                f"number of matches ({len(self.matches)})"
            )
        return self

    def to_json(self) -> str:
        """Serialize as pretty-printed JSON with camelCase summary keys."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return json.dumps(payload, indent=2, ensure_ascii=False)
