from storefront.database.admin import AdminSessionStore, AUTH_KEY, USER_KEY
from storefront.services.notifications import NotificationLevel


def test_starts_signed_out(admin):
    assert admin.is_authenticated is False
    assert admin.admin_user is None


def test_login_with_valid_credentials(admin, storage, notifier):
    assert admin.login("onlineshop@admin", "password") is True

    assert admin.is_authenticated is True
    assert admin.admin_user == "onlineshop@admin"
    assert storage.get_item(AUTH_KEY) == "true"
    assert storage.get_item(USER_KEY) == "onlineshop@admin"
    assert notifier.drain()[-1].level == NotificationLevel.SUCCESS


def test_login_with_wrong_credentials(admin, storage, notifier):
    for username, password in [
        ("onlineshop@admin", "wrong"),
        ("someone", "password"),
        ("", ""),
        ("ONLINESHOP@ADMIN", "password"),
    ]:
        assert admin.login(username, password) is False

    assert admin.is_authenticated is False
    assert storage.get_item(AUTH_KEY) is None
    assert all(n.level == NotificationLevel.ERROR for n in notifier.drain())


def test_failed_login_keeps_existing_session(admin, storage):
    admin.login("onlineshop@admin", "password")

    assert admin.login("intruder", "guess") is False

    assert admin.is_authenticated is True
    assert admin.admin_user == "onlineshop@admin"
    assert storage.get_item(USER_KEY) == "onlineshop@admin"


def test_logout_clears_state_and_storage(admin, storage):
    admin.login("onlineshop@admin", "password")

    admin.logout()

    assert admin.is_authenticated is False
    assert admin.admin_user is None
    assert storage.get_item(AUTH_KEY) is None
    assert storage.get_item(USER_KEY) is None


def test_session_rehydrates_from_storage(storage, notifier):
    storage.set_item(AUTH_KEY, "true")
    storage.set_item(USER_KEY, "x")

    session = AdminSessionStore(storage, notifier)

    assert session.is_authenticated is True
    assert session.admin_user == "x"


def test_other_stored_flag_values_are_signed_out(storage, notifier):
    for value in ["false", "1", "TRUE", ""]:
        storage.set_item(AUTH_KEY, value)
        assert AdminSessionStore(storage, notifier).is_authenticated is False
