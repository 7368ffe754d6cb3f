import logging
import threading
from models import Event, EventDetail, RegistrationStatus, User, UserProfile, category_label

logger = logging.getLogger(__name__)


class EventManager:
    def __init__(self):
        """Initialize EventManager with empty event and user collections."""
        self.events: list[Event] = []
        self.users: list[User] = []
        self.next_id = 1
        self.next_user_id = 1
        # One coarse lock around every operation; the HTTP app serves from a thread pool.
        self._lock = threading.RLock()

    def add_event(self, event: Event) -> Event:
        """Take ownership of an event and assign it the next id."""
        with self._lock:
            if event.id is not None:
                raise ValueError(f"Event {event.id} ({event.name}) is already owned by a manager")
            event.id = self.next_id
            self.next_id += 1
            self.events.append(event)
        logger.info(f"Event {event.id} ({event.name}) added")
        return event

    def create_event(self, name: str, date: str, capacity: int, detail: EventDetail) -> Event:
        """Build a new event and add it."""
        return self.add_event(Event(name=name, date=date, capacity=capacity, detail=detail))

    def add_user(self, user: User) -> User:
        """Add a user and assign it the next user id.

        Usernames are not checked for uniqueness; the id is the stable key.
        """
        with self._lock:
            if user.id is not None:
                raise ValueError(f"User {user.id} ({user.username}) is already owned by a manager")
            user.id = self.next_user_id
            self.next_user_id += 1
            self.users.append(user)
        return user

    def get_user_by_id(self, user_id: int) -> User | None:
        """Retrieve a user by ID."""
        with self._lock:
            return next((u for u in self.users if u.id == user_id), None)

    def get_event(self, event_id: int) -> Event | None:
        """Retrieve an event by ID."""
        with self._lock:
            return next((e for e in self.events if e.id == event_id), None)

    def get_user(self, username: str) -> User | None:
        """Retrieve the first user with the given username."""
        with self._lock:
            return next((u for u in self.users if u.username == username), None)

    def authenticate_user(self, username: str, password: str) -> User | None:
        """Return the first user matching both username and password."""
        with self._lock:
            for user in self.users:
                if user.username == username and user.authenticate(password):
                    logger.info(f"User {username} authenticated")
                    return user
        logger.warning(f"Failed login for {username}")
        return None

    def register_participant(self, event_id: int, username: str) -> RegistrationStatus:
        """Register a username for an event, waitlisting when it is full."""
        with self._lock:
            event = self.get_event(event_id)
            if event is None:
                logger.warning(f"Registration for unknown event {event_id}")
                return RegistrationStatus.INVALID_EVENT_ID
            status = event.register(username)
        logger.info(f"{username} registration for event {event_id}: {status.value}")
        return status

    def register_user(self, event_id: int, user: User) -> RegistrationStatus:
        """Register a user and record the event on their profile if accepted."""
        with self._lock:
            status = self.register_participant(event_id, user.username)
            if status == RegistrationStatus.ACCEPTED:
                user.register_for_event(event_id)
            return status

    def rate_event(self, event_id: int, rating: int, user: User) -> bool:
        """Record a rating on the event and on the user's rating map.

        The rating is not range checked here; callers validate it first.
        Returns False and changes nothing if the event does not exist.
        """
        with self._lock:
            event = self.get_event(event_id)
            if event is None:
                logger.warning(f"Rating for unknown event {event_id}")
                return False
            event.add_rating(rating)
            user.rate_event(event_id, rating)
        logger.info(f"{user.username} rated event {event_id}: {rating}")
        return True

    def search_events(self, query: str) -> list[Event]:
        """Case-sensitive substring search over name, date and category label."""
        with self._lock:
            return [
                e for e in self.events
                if query in e.name or query in e.date or query in category_label(e.category)
            ]

    def list_all_events(self) -> list[Event]:
        """Retrieve all events."""
        with self._lock:
            return list(self.events)

    def user_profile(self, user: User) -> UserProfile:
        """Resolve a user's registrations and ratings to event names."""
        with self._lock:
            names = {e.id: e.name for e in self.events}
            registered = [(eid, names[eid]) for eid in user.registered_events if eid in names]
            ratings = [
                (names[eid], rating)
                for eid, rating in sorted(user.event_ratings.items())
                if eid in names
            ]
        return UserProfile(username=user.username, registered_events=registered, ratings=ratings)
