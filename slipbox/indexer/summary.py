"""Generate text summaries of a vault's tag index."""

from .scanner import State


def generate_tag_summary(state: State, max_tags: int = 30) -> str:
    """Generate a readable summary of the vault's tags.

    Tags are listed by number of notes, most used first, then alphabetically.
    """
    lines = [f"**{len(state)} notes** indexed\n"]

    sorted_tags = _sorted_tag_counts(state)
    if not sorted_tags:
        return lines[0].strip()

    lines.append("**Tags:**")
    for tag, count in sorted_tags[:max_tags]:
        lines.append(f"- #{tag} ({count})")

    if len(sorted_tags) > max_tags:
        lines.append(f"\n*... and {len(sorted_tags) - max_tags} more tags*")

    return "\n".join(lines)


def generate_compact_summary(state: State) -> str:
    """Generate a one-line summary for terminal output."""
    lines = [f"Vault: {len(state)} notes"]

    sorted_tags = _sorted_tag_counts(state)
    lines.append(f"{len(sorted_tags)} tags")

    if sorted_tags:
        tag_strs = [f"#{t}({c})" for t, c in sorted_tags[:10]]
        lines.append(f"Top: {', '.join(tag_strs)}")

    return " | ".join(lines)


def _sorted_tag_counts(state: State) -> list[tuple[str, int]]:
    return sorted(state.tag_counts().items(), key=lambda x: (-x[1], x[0]))
