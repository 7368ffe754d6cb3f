import pytest
from manager import EventManager
from models import Seminar, Sports, Workshop
from seed import seed_demo_data
from shell import Shell

@pytest.fixture
def manager():
    m = EventManager()
    seed_demo_data(m)
    return m

@pytest.fixture
def run_session(manager, monkeypatch, capsys):
    """Feed lines to the shell and return everything it printed."""
    def run(*lines):
        answers = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
        Shell(manager).run()
        return capsys.readouterr().out
    return run

def test_invalid_credentials_reprompt(run_session):
    out = run_session("sit", "wrong", "  sit  ", " pune1234 ", "0", "")
    assert "Invalid credentials. Please try again." in out
    assert "Logged out successfully." in out
    assert out.rstrip().endswith("Goodbye.")

def test_list_events(run_session):
    out = run_session("lavale", "hillbase", "1", "0", "")
    assert "Event: Web Development" in out
    assert "Sport Type: All" in out
    assert out.index("Event ID: 1") < out.index("Event ID: 2") < out.index("Event ID: 3")

def test_register_waitlist_and_invalid(manager, run_session):
    manager.create_event("Tiny", "2024-01-01", 1, Sports("Chess"))
    out = run_session("lavale", "hillbase", "2", "4", "2", "4", "2", "99", "0", "")
    assert "Participant registered successfully." in out
    assert "Event is full. You've been added to the waitlist." in out
    assert "Invalid event ID." in out
    user = manager.get_user("lavale")
    assert user.registered_events == [4]
    assert manager.get_event(4).waitlist == ["lavale"]

def test_search(run_session):
    out = run_session("209", "pass123", "3", "Web", "3", "zzz", "0", "")
    assert "Search results for 'Web':" in out
    assert "Topic: Full-stack JavaScript" in out
    assert "No events found matching the query." in out

def test_rate_rejects_out_of_range(manager, run_session):
    out = run_session("209", "pass123", "4", "1", "6", "4", "1", "5", "0", "")
    assert "Invalid rating. Please enter a number between 1 and 5." in out
    assert "Thank you for rating the event!" in out
    assert manager.get_event(1).ratings == [5]

def test_rate_unknown_event(manager, run_session):
    out = run_session("209", "pass123", "4", "42", "3", "0", "")
    assert "Invalid event ID." in out
    assert manager.get_user("209").event_ratings == {}

def test_profile(run_session):
    out = run_session("lavale", "hillbase", "2", "3", "4", "3", "4", "5", "0", "")
    assert "User Profile for lavale" in out
    assert "- Prota (ID: 3)" in out
    assert "- Prota: 4/5" in out

def test_invalid_menu_choice(run_session):
    out = run_session("lavale", "hillbase", "9", "abc", "0", "")
    assert out.count("Invalid choice. Please try again") == 2

def test_non_admin_cannot_add_event(manager, run_session):
    out = run_session("lavale", "hillbase", "6", "0", "")
    assert "6. Add New Event" not in out
    assert "Invalid choice. Please try again." in out
    assert len(manager.list_all_events()) == 3

def test_admin_adds_workshop(manager, run_session):
    out = run_session(
        "sit", "pune1234", "6",
        "Python Basics", "2025-01-10", "30", "Technical", "Python", "0",
        "0", "",
    )
    assert "6. Add New Event" in out
    assert "Event added successfully. (ID: 4)" in out
    event = manager.get_event(4)
    assert event.name == "Python Basics"
    assert event.detail == Workshop(topic="Python", online=False)

def test_admin_invalid_category(manager, run_session):
    out = run_session("sit", "pune1234", "6", "Fest", "2025-02-01", "200", "Cultural", "0", "")
    assert "Invalid category. Event not added." in out
    assert len(manager.list_all_events()) == 3

def test_admin_rejects_non_positive_capacity(manager, run_session):
    out = run_session("sit", "pune1234", "6", "Fest", "2025-02-01", "0", "0", "")
    assert "Capacity must be positive." in out
    assert len(manager.list_all_events()) == 3

def test_end_of_input_exits(run_session):
    out = run_session("lavale", "hillbase")
    assert out.rstrip().endswith("Goodbye.")

def test_admin_adds_seminar(manager, run_session):
    out = run_session(
        "sit", "pune1234", "6",
        "Ethics in AI", "2025-05-05", "40", "Academic", "Dr. Kale",
        "0", "",
    )
    assert "Event added successfully. (ID: 4)" in out
    event = manager.get_event(4)
    assert event.detail == Seminar(speaker="Dr. Kale")
    assert "Speaker: Dr. Kale" in event.describe()

def test_admin_adds_sports_event(manager, run_session):
    out = run_session(
        "sit", "pune1234", "6",
        "Inter-hostel Cricket", "2025-02-14", "120", "Sports", "Cricket",
        "0", "",
    )
    assert "Event added successfully. (ID: 4)" in out
    assert manager.get_event(4).detail == Sports(sport_type="Cricket")

def test_rate_non_numeric_rating(manager, run_session):
    out = run_session("209", "pass123", "4", "1", "abc", "0", "")
    assert "Invalid rating. Please enter a number between 1 and 5: 'abc' is not a number." in out
    assert "Invalid choice" not in out
    assert manager.get_event(1).ratings == []
