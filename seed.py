from manager import EventManager
from models import Seminar, Sports, User, Workshop
from utils import hash_password


def seed_demo_data(manager: EventManager):
    """Load the demo users and events the campus console starts with."""
    manager.add_user(User("sit", hash_password("pune1234"), is_admin=True))
    manager.add_user(User("lavale", hash_password("hillbase")))
    manager.add_user(User("209", hash_password("pass123")))

    manager.create_event(
        "Career in CyberSecurity and Digital Forensics", "2024-11-15", 100,
        Seminar(speaker="Mr. Nikhil Mahadeshwar"),
    )
    manager.create_event(
        "Web Development", "2024-11-01", 50,
        Workshop(topic="Full-stack JavaScript", online=True),
    )
    manager.create_event("Prota", "2024-08-20", 500, Sports(sport_type="All"))
