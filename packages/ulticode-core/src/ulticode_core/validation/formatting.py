import json
from collections.abc import Iterable
from typing import Any

from ulticode_core.models.validation_report import ValidationError


def _json_value(value: Any) -> str:
    return json.dumps(value, default=str, ensure_ascii=False)


def format_issue(issue: ValidationError) -> str:
    """Render one finding as ``- [severity] entity.field: message (value: ...)``."""
    line = f"- [{issue.severity}] {issue.entity}.{issue.field}: {issue.message}"
    if issue.value is not None:
        line += f" (value: {_json_value(issue.value)})"
    return line


def format_issues(issues: Iterable[ValidationError]) -> str:
    return "\n".join(format_issue(issue) for issue in issues)
