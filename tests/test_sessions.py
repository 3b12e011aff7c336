from http.cookies import SimpleCookie

from blogapp.core import security
from blogapp.core.security import create_session_token, verify_session_token
from blogapp.services import sessions


def _set_cookies(response) -> SimpleCookie:
    jar = SimpleCookie()
    for header in response.headers.get_list("set-cookie"):
        jar.load(header)
    return jar


def test_create_returns_user_for_matching_credentials(db, make_user):
    user = make_user(email="a@x.com", password="secret")
    assert sessions.create(db, "a@x.com", "secret").id == user.id
    assert sessions.create(db, "  A@X.com ", "secret").id == user.id


def test_create_fails_the_same_way_for_unknown_email_and_wrong_password(db, make_user):
    make_user(email="a@x.com", password="secret")
    assert sessions.create(db, "a@x.com", "wrong") is None
    assert sessions.create(db, "nobody@x.com", "secret") is None
    assert sessions.create(db, None, None) is None


def test_login_sets_cookie_and_redirects_to_profile(client, codec, cookie_name, make_user):
    user = make_user(email="a@x.com", password="secret")

    r = client.post(
        "/sessions",
        data={"email": "a@x.com", "password": "secret"},
        follow_redirects=False,
    )

    assert r.status_code == 303
    assert f"/users/{user.id}" in r.headers["location"]
    assert "notice=" in r.headers["location"]
    cookie = _set_cookies(r)[cookie_name]
    assert cookie["httponly"]
    assert verify_session_token(codec, cookie.value) == user.id


def test_login_failure_rerenders_form_without_cookie(client, make_user):
    make_user(email="a@x.com", password="secret")

    wrong = client.post("/sessions", data={"email": "a@x.com", "password": "wrong"}, follow_redirects=False)
    unknown = client.post("/sessions", data={"email": "b@x.com", "password": "secret"}, follow_redirects=False)

    for r in (wrong, unknown):
        assert r.status_code == 200
        assert "please try again" in r.text
        assert "set-cookie" not in r.headers
    assert wrong.text.replace("a@x.com", "b@x.com") == unknown.text


def test_failed_login_keeps_existing_session(client, login, make_user):
    alice = make_user(email="a@x.com", password="secret")
    login(alice)

    r = client.post("/sessions", data={"email": "a@x.com", "password": "nope"}, follow_redirects=False)
    assert "set-cookie" not in r.headers

    me = client.get("/sessions/current").json()
    assert me["authenticated"] is True
    assert me["user"]["id"] == alice.id


def test_concrete_login_scenario(client, codec, cookie_name, make_user):
    user = make_user(email="a@x.com", password="secret")

    r = client.post("/sessions", data={"email": "a@x.com", "password": "wrong"}, follow_redirects=False)
    assert cookie_name not in _set_cookies(r)

    r = client.post("/sessions", data={"email": "a@x.com", "password": "secret"}, follow_redirects=False)
    assert verify_session_token(codec, _set_cookies(r)[cookie_name].value) == user.id


def test_login_redirect_lands_on_profile_with_notice(client, make_user):
    make_user(email="a@x.com", password="secret")
    r = client.post("/sessions", data={"email": "a@x.com", "password": "secret"})
    assert r.status_code == 200
    assert "Session was successfully created." in r.text
    assert "a@x.com" in r.text


def test_destroy_clears_cookie_and_is_idempotent(client, login, cookie_name, make_user):
    login(make_user())

    first = client.delete("/sessions/current", follow_redirects=False)
    assert first.status_code == 303
    assert first.headers["location"].endswith("/sessions/new")
    assert _set_cookies(first)[cookie_name]["max-age"] == "0"

    client.cookies.clear()
    second = client.delete("/sessions/current", follow_redirects=False)
    assert second.status_code == 303
    assert _set_cookies(second)[cookie_name]["max-age"] == "0"
    assert client.get("/sessions/current").json() == {"authenticated": False, "user": None}


def test_logout_form_route(client, login, cookie_name, make_user):
    login(make_user())
    r = client.post("/logout", follow_redirects=False)
    assert r.status_code == 303
    assert _set_cookies(r)[cookie_name]["max-age"] == "0"


def test_login_form_renders(client):
    r = client.get("/sessions/new")
    assert r.status_code == 200
    assert 'name="password"' in r.text


def test_token_made_for_one_user_is_not_another(codec, make_user):
    a = make_user(email="a@x.com")
    b = make_user(email="b@x.com")
    assert verify_session_token(codec, create_session_token(codec, a.id)) != b.id


def test_unknown_email_still_runs_a_hash_check(db, make_user, monkeypatch):
    make_user(email="a@x.com", password="secret")
    calls = []

    def counting_dummy_verify(*args, **kwargs):
        calls.append(1)
        return False

    monkeypatch.setattr(security.pwd_context, "dummy_verify", counting_dummy_verify)

    assert sessions.create(db, "nobody@x.com", "secret") is None
    assert calls == [1]

    assert sessions.create(db, "a@x.com", "wrong") is None
    assert calls == [1]
