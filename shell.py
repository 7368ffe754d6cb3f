import logging
from errors import EventManagementError, InvalidCapacity, InvalidEventId, InvalidMenuChoice, InvalidRating
from manager import EventManager
from models import Category, RegistrationStatus, User
from seed import seed_demo_data
from utils import (
    build_detail, check_admin, format_profile, parse_category, trim,
    validate_capacity, validate_rating,
)
import config

logger = logging.getLogger(__name__)

SEPARATOR = "------------------------"

REGISTRATION_MESSAGES = {
    RegistrationStatus.ACCEPTED: "Participant registered successfully.",
    RegistrationStatus.WAITLISTED: "Event is full. You've been added to the waitlist.",
    RegistrationStatus.INVALID_EVENT_ID: "Invalid event ID.",
}


def read_int(prompt: str, error=InvalidMenuChoice) -> int:
    value = input(prompt).strip()
    try:
        return int(value)
    except ValueError:
        raise error(f"{error.message}: {value!r} is not a number")


class Shell:
    """Interactive text session driving an EventManager."""

    def __init__(self, manager: EventManager):
        self.manager = manager
        self.current_user: User | None = None

    def run(self):
        """Loop between the login prompt and the menu until input ends."""
        try:
            while True:
                if self.current_user is None and not self.login():
                    break
                if self.current_user is not None:
                    self.menu()
        except EOFError:
            print()
        print("Goodbye.")

    def login(self) -> bool:
        """Prompt for credentials. Returns False when the user wants to quit."""
        username = trim(input("Enter username: "))
        if not username:
            return False
        password = trim(input("Enter password: "))
        self.current_user = self.manager.authenticate_user(username, password)
        if self.current_user is None:
            print("Invalid credentials. Please try again.")
        return True

    def menu(self):
        print("\nCampus Event Management System")
        print("1. Display All Events")
        print("2. Register for an Event")
        print("3. Search Events")
        print("4. Rate an Event")
        print("5. View User Profile")
        if self.current_user.is_admin:
            print("6. Add New Event")
        print("0. Logout")
        try:
            self.dispatch(read_int("Enter your choice: "))
        except EventManagementError as e:
            logger.warning(f"{type(e).__name__}: {e.message}")
            print(f"{e.message}.")

    def dispatch(self, choice: int):
        actions = {
            1: self.display_events,
            2: self.register,
            3: self.search,
            4: self.rate,
            5: self.profile,
            6: self.add_event,
            0: self.logout,
        }
        if choice not in actions:
            raise InvalidMenuChoice()
        actions[choice]()

    def display_events(self):
        for event in self.manager.list_all_events():
            print(event.describe())
            print(SEPARATOR)

    def register(self):
        event_id = read_int("Enter the event ID: ", InvalidEventId)
        status = self.manager.register_user(event_id, self.current_user)
        print(REGISTRATION_MESSAGES[status])

    def search(self):
        query = input("Enter search query: ")
        print(f"Search results for '{query}':")
        results = self.manager.search_events(query)
        if not results:
            print("No events found matching the query.")
        for event in results:
            print(event.describe())
            print(SEPARATOR)

    def rate(self):
        event_id = read_int("Enter the event ID: ", InvalidEventId)
        rating = validate_rating(read_int("Enter your rating (1-5): ", InvalidRating))
        if self.manager.rate_event(event_id, rating, self.current_user):
            print("Thank you for rating the event!")
        else:
            print("Invalid event ID.")

    def profile(self):
        print(format_profile(self.manager.user_profile(self.current_user)))

    def add_event(self):
        try:
            check_admin(self.current_user)
        except EventManagementError:
            raise InvalidMenuChoice()
        name = input("Enter event name: ")
        date = input("Enter event date (YYYY-MM-DD): ")
        capacity = validate_capacity(read_int("Enter event capacity: ", InvalidCapacity))
        category_name = trim(input("Enter event category (Academic, Technical, Sports): "))
        try:
            category = parse_category(category_name)
        except EventManagementError:
            print("Invalid category. Event not added.")
            return
        if category == Category.ACADEMIC:
            detail = build_detail(category, speaker=input("Enter speaker's name: "))
        elif category == Category.TECHNICAL:
            topic = input("Enter workshop topic: ")
            online = read_int("Is it online? (1 for Yes, 0 for No): ") == 1
            detail = build_detail(category, topic=topic, online=online)
        else:
            detail = build_detail(category, sport_type=input("Enter sport type: "))
        event = self.manager.create_event(name, date, capacity, detail)
        print(f"Event added successfully. (ID: {event.id})")

    def logout(self):
        logger.info(f"User {self.current_user.username} logged out")
        self.current_user = None
        print("Logged out successfully.")


def main():
    logging.basicConfig(level=config.LOG_LEVEL)
    manager = EventManager()
    if config.SEED_DEMO_DATA:
        seed_demo_data(manager)
    Shell(manager).run()


if __name__ == "__main__":
    main()
