from passlib.hash import bcrypt
from errors import InvalidCapacity, InvalidCategory, InvalidRating, PermissionDenied
from models import Category, Seminar, Sports, UserProfile, Workshop
import config

# Categories an admin may create events in; Cultural has no variant.
CREATABLE_CATEGORIES = {
    "Academic": Category.ACADEMIC,
    "Technical": Category.TECHNICAL,
    "Sports": Category.SPORTS,
}


def trim(value: str) -> str:
    """Strip leading and trailing spaces (only spaces, not tabs or newlines)."""
    return value.strip(" ")


def hash_password(password: str) -> str:
    """Hash a plaintext password for storage on a User."""
    return bcrypt.using(rounds=config.BCRYPT_ROUNDS).hash(password)


def parse_category(name: str) -> Category:
    """Map a category name entered by an admin to a creatable Category."""
    try:
        return CREATABLE_CATEGORIES[name]
    except KeyError:
        raise InvalidCategory(f"Invalid category: {name!r}")


def build_detail(category: Category, speaker=None, topic=None, online=False, sport_type=None):
    if category == Category.ACADEMIC:
        return Seminar(speaker=speaker or "")
    if category == Category.TECHNICAL:
        return Workshop(topic=topic or "", online=bool(online))
    if category == Category.SPORTS:
        return Sports(sport_type=sport_type or "")
    raise InvalidCategory()


def validate_rating(rating: int) -> int:
    if not 1 <= rating <= 5:
        raise InvalidRating()
    return rating


def validate_capacity(capacity: int) -> int:
    if capacity <= 0:
        raise InvalidCapacity()
    return capacity


def check_admin(user):
    """Check that the user may perform admin-only operations."""
    if not user.is_admin:
        raise PermissionDenied()


def format_profile(profile: UserProfile) -> str:
    lines = [f"User Profile for {profile.username}", "Registered Events:"]
    for event_id, name in profile.registered_events:
        lines.append(f"- {name} (ID: {event_id})")
    lines.append("Event Ratings:")
    for name, rating in profile.ratings:
        lines.append(f"- {name}: {rating}/5")
    return "\n".join(lines)
