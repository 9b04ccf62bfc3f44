import io

import pytest

from frogcross.colors import Colors
from frogcross.datamanager import DataManager
from frogcross.user_menu import UserManagementMenu


def scripted(*lines):
    queue = list(lines)

    def read_line():
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read_line


@pytest.fixture
def data_manager(tmp_path):
    return DataManager(Colors(), tmp_path / "data")


def make_menu(dm, *lines):
    out = io.StringIO()
    waits = []
    menu = UserManagementMenu(
        dm,
        Colors(),
        read_line=scripted(*lines),
        output=out,
        wait_key=lambda: waits.append(True),
        clear=lambda: None,
    )
    return menu, out, waits


def test_play_as_guest(data_manager):
    menu, out, _ = make_menu(data_manager, "4")
    assert menu.show_user_menu() is True
    assert not data_manager.has_logged_in_user()
    assert "Play as Guest" in out.getvalue()


def test_exit_returns_false(data_manager):
    menu, out, _ = make_menu(data_manager, "0")
    assert menu.show_user_menu() is False
    assert "Thank you for playing!" in out.getvalue()


def test_end_of_input_returns_false(data_manager):
    menu, _, _ = make_menu(data_manager)
    assert menu.show_user_menu() is False


def test_register_logs_in_and_starts(data_manager):
    menu, out, waits = make_menu(data_manager, "2", "alice", "alice@example.com", "5")
    assert menu.show_user_menu() is True
    assert data_manager.has_logged_in_user()
    assert data_manager.current_user.username == "alice"
    assert data_manager.current_user.email == "alice@example.com"
    assert "You are now logged in as alice!" in out.getvalue()
    assert len(waits) == 1


def test_register_duplicate_user(data_manager):
    data_manager.register_user("bob", "bob@example.com")
    menu, out, _ = make_menu(data_manager, "2", "bob", "other@example.com", "4")
    assert menu.show_user_menu() is True
    assert "Username already exists!" in out.getvalue()
    assert not data_manager.has_logged_in_user()


def test_login_unknown_user(data_manager):
    menu, out, _ = make_menu(data_manager, "1", "nobody", "4")
    assert menu.show_user_menu() is True
    assert "User not found!" in out.getvalue()
    assert not data_manager.has_logged_in_user()


def test_login_known_user(data_manager):
    data_manager.register_user("dave", "dave@example.com")
    menu, out, _ = make_menu(data_manager, "1", "dave", "5")
    assert menu.show_user_menu() is True
    assert data_manager.current_user.username == "dave"
    assert "Login successful! Welcome back, dave!" in out.getvalue()


def test_logout_then_play_as_guest(data_manager):
    data_manager.register_user("carol", "carol@example.com")
    data_manager.login_user("carol")
    menu, out, _ = make_menu(data_manager, "4", "4")
    assert menu.show_user_menu() is True
    assert not data_manager.has_logged_in_user()
    assert not data_manager.current_user_file.exists()
    assert "Successfully logged out!" in out.getvalue()


def test_invalid_input_is_reported(data_manager):
    menu, out, waits = make_menu(data_manager, "abc", "4")
    assert menu.show_user_menu() is True
    assert "Invalid input! Please enter a number." in out.getvalue()
    assert len(waits) == 1


def test_out_of_range_choice_is_reported(data_manager):
    menu, out, _ = make_menu(data_manager, "9", "4")
    assert menu.show_user_menu() is True
    assert "Invalid choice! Please select between 0 and 4." in out.getvalue()


def test_logged_in_range_is_wider(data_manager):
    data_manager.register_user("erin", "erin@example.com")
    data_manager.login_user("erin")
    menu, out, _ = make_menu(data_manager, "6", "5")
    assert menu.show_user_menu() is True
    assert "Invalid choice! Please select between 0 and 5." in out.getvalue()


def test_guest_views_leaderboard(data_manager):
    menu, out, waits = make_menu(data_manager, "3", "4")
    assert menu.show_user_menu() is True
    assert "LEADERBOARD" in out.getvalue()
    assert len(waits) == 1


def test_logged_in_views_profile_and_history(data_manager):
    data_manager.register_user("frank", "frank@example.com")
    data_manager.login_user("frank")
    menu, out, waits = make_menu(data_manager, "1", "2", "5")
    assert menu.show_user_menu() is True
    text = out.getvalue()
    assert "USER PROFILE" in text
    assert "No game history available." in text
    assert "Welcome back, frank!" in text
    assert len(waits) == 2