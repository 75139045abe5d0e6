"""Core data schema for work logs and team members."""

from dataclasses import dataclass, field
from typing import Optional

MOODS = {
    "productive": "Productive 😄",
    "neutral": "Neutral 😐",
    "frustrated": "Frustrated 😓",
    "stressed": "Stressed 😰",
    "inspired": "Inspired 🚀",
}

ROLES = ("developer", "manager")


def mood_label(mood: str) -> str:
    """Return the display label for a mood, or the raw value if unknown."""

    return MOODS.get(mood, mood)


@dataclass(frozen=True)
class Task:
    """A single unit of work inside a log."""

    id: str
    description: str
    time_spent: int
    completed: bool = False


@dataclass(frozen=True)
class WorkLog:
    """One user's record of a single day's work."""

    id: str
    user_id: str
    date: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    mood: str = "neutral"
    blockers: Optional[str] = None
    reviewed: bool = False
    manager_comments: Optional[str] = None

    def __post_init__(self) -> None:
        # lists are accepted for convenience but stored as tuples
        if not isinstance(self.tasks, tuple):
            object.__setattr__(self, "tasks", tuple(self.tasks))

    @property
    def has_blockers(self) -> bool:
        return bool(self.blockers and self.blockers.strip())


@dataclass(frozen=True)
class TeamMember:
    """Directory entry linking a person to their manager."""

    id: str
    name: str
    email: str
    role: str
    team: Optional[str] = None
    manager_id: Optional[str] = None


@dataclass(frozen=True)
class User:
    """The authenticated actor."""

    id: str
    name: str
    email: str
    role: str
    team: Optional[str] = None

    @property
    def is_manager(self) -> bool:
        return self.role == "manager"


@dataclass(frozen=True)
class ProductivityPoint:
    """Heatmap cell: a calendar date and a 0-10 productivity value."""

    date: str
    value: int
