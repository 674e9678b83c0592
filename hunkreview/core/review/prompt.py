from hunkreview.core.schema.diff import DiffFile, DiffHunk
from hunkreview.core.schema.revision import RevisionContext

INSTRUCTIONS = """Your task is to review pull requests. Instructions:
- Provide the response in following JSON format: [{"lineNumber": <line_number>, "reviewComment": "<review comment>"}]
- Respond with the JSON array only, without any other text.
- Do not give positive comments or compliments.
- Provide comments and suggestions ONLY if there is something to improve, otherwise return an empty array.
- Write the comment in GitHub Markdown format.
- Use the given description only for the overall context and only comment the code.
- IMPORTANT: NEVER suggest adding comments to the code."""

REVIEW_TEMPLATE = """{instructions}

Review the following code diff in the file "{path}" and take the pull request title and description into account when writing the response.

Pull request title: {title}
Pull request description:

---
{description}
---

Git diff to review:

```diff
{header}
{changes}
```
"""


class PromptBuilder:
    """Renders the review prompt for one hunk.

    Each change is prefixed with its effective line number so the model's
    ``lineNumber`` can be posted back without translation.
    """

    def __init__(self, instructions: str = INSTRUCTIONS) -> None:
        self._instructions = instructions

    def build(
        self,
        file: DiffFile,
        hunk: DiffHunk,
        context: RevisionContext,
    ) -> str:
        changes = "\n".join(
            f"{_format_line_number(change.line_number)} {change.content}"
            for change in hunk.changes
        )
        return REVIEW_TEMPLATE.format(
            instructions=self._instructions,
            path=file.path or "",
            title=context.title,
            description=context.description,
            header=hunk.header,
            changes=changes,
        )


def _format_line_number(value: int | None) -> str:
    return "" if value is None else str(value)
