"""Team visual theme passed to the pitch renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TeamTheme:
    """Resolved colours and CSS class for one team's markers."""
    css_class: str
    primary: str
    secondary: str

    @classmethod
    def default(cls) -> TeamTheme:
        return cls(
            css_class="team-default",
            primary="var(--color-primary)",
            secondary="var(--color-bg)",
        )


TEAM_THEMES = {
    "ars": TeamTheme("team-ars", "var(--team-ars)", "var(--team-ars-secondary)"),
    "lee": TeamTheme("team-lee", "var(--team-lee)", "var(--team-lee-secondary)"),
}

TEAM_ALIASES = {
    "arsenal": "ars",
    "leeds": "lee",
}


def resolve_team_theme(team_id: str) -> TeamTheme:
    """Resolve a team identifier (short code or club name) to its theme."""
    key = (team_id or "").strip().lower()
    key = TEAM_ALIASES.get(key, key)
    return TEAM_THEMES.get(key, TeamTheme.default())
