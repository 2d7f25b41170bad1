import asyncio

import httpx
from supabase import AuthApiError

from inovaweek.views import IDLE, PasswordResetView, ResetError, ResetSuccess
from inovaweek.views.password_reset import ERROR_PREFIX, SUCCESS_TEXT

from conftest import FakeSupabase


async def test_success_sets_only_success_message(navigator):
    client = FakeSupabase()
    view = PasswordResetView(client, navigator)

    message = await view.submit_reset("ana@example.com")

    assert message == ResetSuccess(SUCCESS_TEXT)
    assert view.message == message
    assert client.auth.calls == [("ana@example.com", {})]


async def test_failure_message_contains_provider_text(navigator):
    client = FakeSupabase(auth_error=AuthApiError("Email rate limit exceeded", 429, "over_email_send_rate_limit"))
    view = PasswordResetView(client, navigator)

    message = await view.submit_reset("ana@example.com")

    assert isinstance(message, ResetError)
    assert message.text == ERROR_PREFIX + "Email rate limit exceeded"
    assert "Email rate limit exceeded" in view.render().message.text


async def test_success_after_error_clears_error(navigator):
    client = FakeSupabase(auth_error=AuthApiError("User not found", 400, None))
    view = PasswordResetView(client, navigator)
    await view.submit_reset("nobody@example.com")

    client.auth.error = None
    await view.submit_reset("ana@example.com")

    screen = view.render()
    assert screen.message.kind == "success"
    assert screen.message.color == "green"
    assert screen.message.text == SUCCESS_TEXT


async def test_error_after_success_clears_success(navigator):
    client = FakeSupabase()
    view = PasswordResetView(client, navigator)
    await view.submit_reset("ana@example.com")

    client.auth.error = AuthApiError("Invalid email", 400, None)
    await view.submit_reset("ana")

    screen = view.render()
    assert screen.message.kind == "error"
    assert screen.message.color == "red"


async def test_transport_failure_becomes_error_message(navigator):
    client = FakeSupabase(auth_error=httpx.ConnectError("connection refused"))
    view = PasswordResetView(client, navigator)

    message = await view.submit_reset("ana@example.com")

    assert isinstance(message, ResetError)
    assert "connection refused" in message.text


async def test_email_is_not_validated_client_side(navigator):
    client = FakeSupabase()
    view = PasswordResetView(client, navigator)
    view.set_email("not an email")

    await view.submit_reset()

    assert client.auth.calls == [("not an email", {})]


async def test_second_submit_while_pending_is_ignored(navigator, gate):
    client = FakeSupabase()
    client.auth.gate = gate
    view = PasswordResetView(client, navigator)

    first = asyncio.create_task(view.submit_reset("ana@example.com"))
    await asyncio.sleep(0)
    assert view.pending

    assert await view.submit_reset("ana@example.com") == IDLE

    gate.set()
    await first
    assert len(client.auth.calls) == 1
    assert not view.pending
    assert view.message == ResetSuccess(SUCCESS_TEXT)


async def test_each_press_after_settling_makes_a_new_call(navigator):
    client = FakeSupabase()
    view = PasswordResetView(client, navigator)

    await view.submit_reset("ana@example.com")
    await view.submit_reset("ana@example.com")

    assert len(client.auth.calls) == 2


def test_initial_render_has_no_message(navigator):
    view = PasswordResetView(FakeSupabase(), navigator, back_path="/login")

    screen = view.render()

    assert view.message == IDLE
    assert screen.message is None
    assert screen.title == "Recuperar Senha"
    assert screen.placeholder == "Digite seu email"
    assert screen.back_path == "/login"


def test_back_to_login_navigates(navigator):
    view = PasswordResetView(FakeSupabase(), navigator)

    view.back_to_login()

    assert navigator.visited == ["Login"]


async def test_redirect_url_is_forwarded(monkeypatch, navigator):
    from inovaweek.core.config import settings

    redirect = "https://inovaweek.app/reset"
    monkeypatch.setattr(settings, "PASSWORD_RESET_REDIRECT_URL", redirect)
    client = FakeSupabase()

    await PasswordResetView(client, navigator).submit_reset("ana@example.com")

    assert client.auth.calls == [("ana@example.com", {"redirect_to": redirect})]
