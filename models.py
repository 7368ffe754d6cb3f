from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from passlib.hash import bcrypt


class Category(Enum):
    ACADEMIC = "Academic"
    CULTURAL = "Cultural"  # declared, no event variant maps to it
    TECHNICAL = "Technical"
    SPORTS = "Sports"


class RegistrationStatus(Enum):
    ACCEPTED = "accepted"
    WAITLISTED = "waitlisted"
    INVALID_EVENT_ID = "invalid_event_id"


CATEGORY_LABELS = {
    Category.ACADEMIC: "Academic",
    Category.CULTURAL: "Cultural",
    Category.TECHNICAL: "Technical",
    Category.SPORTS: "Sports",
}


def category_label(category) -> str:
    """Return the display label for a category, or "Unknown"."""
    return CATEGORY_LABELS.get(category, "Unknown")


@dataclass
class Seminar:
    speaker: str


@dataclass
class Workshop:
    topic: str
    online: bool = False


@dataclass
class Sports:
    sport_type: str


EventDetail = Seminar | Workshop | Sports


def detail_category(detail: EventDetail) -> Optional[Category]:
    if isinstance(detail, Seminar):
        return Category.ACADEMIC
    if isinstance(detail, Workshop):
        return Category.TECHNICAL
    if isinstance(detail, Sports):
        return Category.SPORTS
    return None


def detail_lines(detail: EventDetail) -> list[str]:
    """Variant-specific lines of an event description."""
    if isinstance(detail, Seminar):
        return [f"Speaker: {detail.speaker}"]
    if isinstance(detail, Workshop):
        return [f"Topic: {detail.topic}", f"Format: {'Online' if detail.online else 'Offline'}"]
    if isinstance(detail, Sports):
        return [f"Sport Type: {detail.sport_type}"]
    return []


def detail_fields(detail: EventDetail) -> dict:
    if isinstance(detail, Seminar):
        return {"speaker": detail.speaker}
    if isinstance(detail, Workshop):
        return {"topic": detail.topic, "online": detail.online}
    if isinstance(detail, Sports):
        return {"sport_type": detail.sport_type}
    return {}


@dataclass
class Event:
    name: str
    date: str  # kept as entered, never parsed
    capacity: int
    detail: EventDetail
    id: Optional[int] = None  # assigned by EventManager.add_event
    registered_users: list[str] = field(default_factory=list)
    waitlist: list[str] = field(default_factory=list)
    ratings: list[int] = field(default_factory=list)

    @property
    def category(self) -> Optional[Category]:
        return detail_category(self.detail)

    def register(self, username: str) -> RegistrationStatus:
        """Register a participant, or waitlist them when the event is full."""
        if len(self.registered_users) < self.capacity:
            self.registered_users.append(username)
            return RegistrationStatus.ACCEPTED
        self.waitlist.append(username)
        return RegistrationStatus.WAITLISTED

    def add_rating(self, rating: int):
        self.ratings.append(rating)

    def average_rating(self) -> Optional[float]:
        if not self.ratings:
            return None
        return sum(self.ratings) / len(self.ratings)

    def describe(self) -> str:
        """Return a string representation of the event details."""
        lines = [
            f"Event ID: {self.id}",
            f"Event: {self.name}",
            f"Date: {self.date}",
            f"Capacity: {self.capacity}",
            f"Category: {category_label(self.category)}",
        ]
        average = self.average_rating()
        if average is not None:
            lines.append(f"Average Rating: {average:.1f}")
        lines.extend(detail_lines(self.detail))
        return "\n".join(lines)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "date": self.date,
            "capacity": self.capacity,
            "category": category_label(self.category),
            "registered": len(self.registered_users),
            "waitlisted": len(self.waitlist),
            "average_rating": self.average_rating(),
        }
        data.update(detail_fields(self.detail))
        return data


@dataclass
class User:
    username: str
    password: str  # bcrypt hash
    is_admin: bool = False
    registered_events: list[int] = field(default_factory=list)
    event_ratings: dict[int, int] = field(default_factory=dict)
    id: Optional[int] = None  # assigned by EventManager.add_user

    def authenticate(self, password: str) -> bool:
        return bcrypt.verify(password, self.password)

    def register_for_event(self, event_id: int):
        self.registered_events.append(event_id)

    def rate_event(self, event_id: int, rating: int):
        self.event_ratings[event_id] = rating


@dataclass
class UserProfile:
    username: str
    registered_events: list[tuple[int, str]]  # (event id, event name)
    ratings: list[tuple[str, int]]  # (event name, rating)

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "registered_events": [{"id": i, "name": n} for i, n in self.registered_events],
            "ratings": [{"event": n, "rating": r} for n, r in self.ratings],
        }
