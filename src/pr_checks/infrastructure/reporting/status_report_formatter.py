"""Pure functions for building the Markdown summary of a check run."""

_SECTIONS = ("Errors", "Warnings", "Messages")


def build_status_summary(errors: list[str], warnings: list[str], messages: list[str]) -> str:
    """Build a severity-grouped Markdown summary, errors first."""
    verdict = "FAILED" if errors else "PASSED"
    header = f"## PR checks: {verdict}\n"
    if not (errors or warnings or messages):
        return f"{header}\n> No issues found."

    sections = [header]
    for title, items in zip(_SECTIONS, (errors, warnings, messages), strict=True):
        if items:
            sections.append(_format_section(title, items))
    return "\n".join(sections)


def _format_section(title: str, items: list[str]) -> str:
    """One heading, then each message as its own block so fenced code survives."""
    blocks = [f"### {title} ({len(items)})"]
    blocks.extend(item.rstrip("\n") for item in items)
    return "\n\n".join(blocks) + "\n"
