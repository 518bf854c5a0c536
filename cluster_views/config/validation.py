from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cluster_views.core.context import ClusterContext


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class ValidationError(Exception):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))


def validate_context(ctx: ClusterContext, color_targets: Iterable[str] = ()) -> None:
    issues: list[ValidationIssue] = []

    if len(ctx.views) == 0:
        issues.append(ValidationIssue("CONTEXT_NO_VIEWS", "No chart views configured."))

    if not ctx.variables:
        issues.append(ValidationIssue("CONTEXT_NO_VARIABLES", "No clustering variables configured."))

    for var in ctx.variables:
        if not ctx.dataset.has_field(var):
            issues.append(
                ValidationIssue("CONTEXT_VARIABLE", f"variable '{var}' not present in the dataset.")
            )

    for view_id in ctx.partition:
        if view_id not in ctx.views:
            issues.append(
                ValidationIssue("CONTEXT_PARTITION", f"partition entry '{view_id}' has no matching view.")
            )

    for view_id in color_targets:
        if view_id not in ctx.views:
            issues.append(
                ValidationIssue("CONTEXT_COLOR_TARGET", f"color target '{view_id}' has no matching view.")
            )

    if issues:
        raise ValidationError(issues)
