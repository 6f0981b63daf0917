from collections import Counter

from docsafe.models import CheckMatch, Report, ReportSummary

GENERIC_RULE_ID = "GENERIC"


def build_report(
    file_name: str,
    language: str,
    text_length: int,
    matches: list[CheckMatch],
) -> Report:
    """Build a report from the matches returned by the checking service.

    Args:
        file_name: Name of the cleaned document.
        language: Language code used for the check.
        text_length: Length of the checked text.
        matches: Matches in the order they were returned.

    Returns:
        Report whose summary counts issues in total and per rule.
    """
    by_rule = Counter(match.rule_id or GENERIC_RULE_ID for match in matches)
    summary = ReportSummary(
        file_name=file_name,
        language=language,
        text_length=text_length,
        total_issues=len(matches),
        by_rule=dict(by_rule),
    )
    return Report(summary=summary, matches=list(matches))
