"""Integration tests for the login, journal, planner, emotion and dashboard clients."""

from datetime import date

import httpx
import pytest
import pytest_check as check
from pydantic import ValidationError

from eunoia.client import (
    ApiError,
    AuthApiClient,
    AuthenticationRequired,
    ClientConfig,
    EmotionApiClient,
    InMemoryCredentialProvider,
    JournalApiClient,
    LoginError,
    PlannerApiClient,
    TimetableConflictError,
)
from eunoia.dashboard import load_dashboard
from eunoia.models import (
    EmotionLogInput,
    JournalEntryInput,
    TimetableEntry,
    TimetableEntryInput,
    TodoInput,
)
from tests.fake_backend import VALID_PASSWORD, VALID_USERNAME, BackendState


class TestLogin:
    """Tests for AuthApiClient."""

    @pytest.fixture
    def store(self) -> InMemoryCredentialProvider:
        return InMemoryCredentialProvider()

    @pytest.fixture
    def auth(
        self,
        client_config: ClientConfig,
        store: InMemoryCredentialProvider,
        backend_transport: httpx.ASGITransport,
    ) -> AuthApiClient:
        return AuthApiClient(config=client_config, credentials=store, transport=backend_transport)

    async def test_login_stores_token(
        self, auth: AuthApiClient, store: InMemoryCredentialProvider, token: str
    ) -> None:
        issued = await auth.login(VALID_USERNAME, VALID_PASSWORD)

        check.equal(issued, token)
        check.equal(store.get_token(), token)

    async def test_bad_password_surfaces_backend_error(
        self, auth: AuthApiClient, store: InMemoryCredentialProvider
    ) -> None:
        with pytest.raises(LoginError) as exc_info:
            await auth.login(VALID_USERNAME, "wrong")

        check.equal(str(exc_info.value), "Invalid credentials")
        check.equal(exc_info.value.status_code, 401)
        check.is_none(store.get_token())

    async def test_unreachable_backend(self, client_config: ClientConfig) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        auth = AuthApiClient(config=client_config, transport=httpx.MockTransport(refuse))

        with pytest.raises(LoginError, match="Connection failed"):
            await auth.login(VALID_USERNAME, VALID_PASSWORD)

    async def test_logout_clears_token(
        self, auth: AuthApiClient, store: InMemoryCredentialProvider
    ) -> None:
        await auth.login(VALID_USERNAME, VALID_PASSWORD)

        auth.logout()

        assert store.get_token() is None


class TestJournalClient:
    """Tests for JournalApiClient."""

    @pytest.fixture
    def journal(
        self,
        client_config: ClientConfig,
        credentials: InMemoryCredentialProvider,
        backend_transport: httpx.ASGITransport,
    ) -> JournalApiClient:
        return JournalApiClient(
            config=client_config, credentials=credentials, transport=backend_transport
        )

    async def test_create_and_get_entry(self, journal: JournalApiClient) -> None:
        created = await journal.create_entry(
            JournalEntryInput(title="Evening", content="Quiet walk", mood="Calm", tags=["walk"])
        )
        fetched = await journal.get_entry(created.id)

        check.equal(created.id, "entry-1")
        check.equal(fetched.content, "Quiet walk")
        check.equal(fetched.mood, "Calm")
        check.equal(fetched.tags, ["walk"])

    async def test_list_sends_only_given_filters(
        self, journal: JournalApiClient, backend_state: BackendState
    ) -> None:
        await journal.list_entries(page=2, limit=5, mood="Calm")
        check.equal(backend_state.last_params, {"page": "2", "limit": "5", "mood": "Calm"})

        await journal.list_entries(search="")
        check.equal(backend_state.last_params, {})

    async def test_list_returns_entries(self, journal: JournalApiClient) -> None:
        await journal.create_entry(JournalEntryInput(content="one"))
        await journal.create_entry(JournalEntryInput(content="two"))

        page = await journal.list_entries()

        check.equal([e.content for e in page.entries], ["one", "two"])
        check.equal(page.total_pages, 1)

    async def test_update_and_delete(
        self, journal: JournalApiClient, backend_state: BackendState
    ) -> None:
        created = await journal.create_entry(JournalEntryInput(content="draft"))

        updated = await journal.update_entry(created.id, JournalEntryInput(content="final"))
        await journal.delete_entry(created.id)

        check.equal(updated.content, "final")
        check.equal(backend_state.entries, {})

    async def test_missing_entry_raises_with_status(self, journal: JournalApiClient) -> None:
        with pytest.raises(ApiError) as exc_info:
            await journal.get_entry("nope")

        assert exc_info.value.status_code == 404

    async def test_stats(self, journal: JournalApiClient, backend_state: BackendState) -> None:
        backend_state.journal_stats = {
            "total_entries": 3,
            "mood_stats": [{"_id": "Happy", "count": 2}, {"_id": "Sad", "count": 1}],
            "daily_stats": [{"_id": {"year": 2026, "month": 10, "day": 19}, "count": 3}],
        }

        stats = await journal.get_stats()

        check.equal(stats.total_entries, 3)
        check.equal([m.mood for m in stats.mood_stats], ["Happy", "Sad"])
        check.equal(stats.daily_stats[0].day.as_date(), date(2026, 10, 19))

    async def test_without_token_nothing_is_sent(
        self,
        client_config: ClientConfig,
        backend_transport: httpx.ASGITransport,
        backend_state: BackendState,
    ) -> None:
        journal = JournalApiClient(config=client_config, transport=backend_transport)

        with pytest.raises(AuthenticationRequired):
            await journal.list_entries()

        assert backend_state.calls == []

    async def test_rejected_token_is_cleared(
        self,
        journal: JournalApiClient,
        credentials: InMemoryCredentialProvider,
        backend_state: BackendState,
    ) -> None:
        backend_state.token = "rotated-token"

        with pytest.raises(AuthenticationRequired):
            await journal.get_stats()

        assert credentials.get_token() is None


class TestPlannerAndDashboard:
    """Tests for planner statistics and the combined dashboard."""

    @pytest.fixture
    def planner(
        self,
        client_config: ClientConfig,
        credentials: InMemoryCredentialProvider,
        backend_transport: httpx.ASGITransport,
    ) -> PlannerApiClient:
        return PlannerApiClient(
            config=client_config, credentials=credentials, transport=backend_transport
        )

    @pytest.fixture
    def seeded(self, backend_state: BackendState) -> BackendState:
        backend_state.todos = [
            {"title": "Drink water", "completed": True},
            {"title": "Call mum", "completed": False},
        ]
        backend_state.timetable = {
            "Monday": [{"title": "Yoga"}, {"title": "Study"}],
            "Wednesday": [{"title": "Therapy"}],
        }
        backend_state.journal_stats = {
            "total_entries": 4,
            "mood_stats": [{"_id": "Grateful", "count": 4}],
            "daily_stats": [{"_id": {"year": 2026, "month": 10, "day": 18}, "count": 4}],
        }
        return backend_state

    async def test_planner_stats(self, planner: PlannerApiClient, seeded: BackendState) -> None:
        stats = await planner.get_stats()

        check.equal(stats.total_todos, 2)
        check.equal(stats.completion_rate, 50)
        check.equal(stats.activities_by_day, {"Monday": 2, "Wednesday": 1})
        check.equal(stats.total_activities, 3)
        check.equal(seeded.count("GET /api/todos"), 1)
        check.equal(seeded.count("GET /api/timetable/week"), 1)

    async def test_unexpected_todos_payload(
        self, planner: PlannerApiClient, backend_state: BackendState
    ) -> None:
        backend_state.todos = {"error": "boom"}

        with pytest.raises(ApiError):
            await planner.get_todos()

    async def test_load_dashboard(
        self,
        client_config: ClientConfig,
        credentials: InMemoryCredentialProvider,
        backend_transport: httpx.ASGITransport,
        planner: PlannerApiClient,
        seeded: BackendState,
    ) -> None:
        journal = JournalApiClient(
            config=client_config, credentials=credentials, transport=backend_transport
        )

        summary = await load_dashboard(journal, planner, today=date(2026, 10, 19))

        check.equal(summary.total_entries, 4)
        check.equal(summary.mood_breakdown["Grateful"], 4)
        check.equal([a.entries for a in summary.daily_activity], [0, 0, 0, 0, 0, 4, 0])
        check.equal(summary.planner.completion_rate, 50)


class TestPlannerEditing:
    """Tests for todo and timetable changes through PlannerApiClient."""

    @pytest.fixture
    def planner(
        self,
        client_config: ClientConfig,
        credentials: InMemoryCredentialProvider,
        backend_transport: httpx.ASGITransport,
    ) -> PlannerApiClient:
        return PlannerApiClient(
            config=client_config, credentials=credentials, transport=backend_transport
        )

    async def test_create_todo_sends_iso_due_date(
        self, planner: PlannerApiClient, backend_state: BackendState
    ) -> None:
        await planner.create_todo(
            TodoInput(title="  Book dentist ", priority="high", due_date=date(2026, 10, 23))
        )

        check.equal(backend_state.last_body["title"], "Book dentist")
        check.equal(backend_state.last_body["priority"], "high")
        check.equal(backend_state.last_body["due_date"], "2026-10-23")

        todos = await planner.get_todos()
        check.equal([(t.id, t.title, t.completed) for t in todos], [("todo-1", "Book dentist", False)])

    async def test_complete_then_delete_todo(
        self, planner: PlannerApiClient, backend_state: BackendState
    ) -> None:
        await planner.create_todo(TodoInput(title="Stretch"))

        await planner.set_todo_completed("todo-1", True)
        check.is_true((await planner.get_todos())[0].completed)

        await planner.delete_todo("todo-1")
        check.equal(await planner.get_todos(), [])
        check.equal(backend_state.count("DELETE /api/todos/todo-1"), 1)

    async def test_add_and_delete_timetable_entry(
        self, planner: PlannerApiClient, backend_state: BackendState
    ) -> None:
        entry = TimetableEntryInput(
            day="monday", start_time="09:00", end_time="10:00", activity="Yoga"
        )

        await planner.add_timetable_entry(entry)
        week = await planner.get_week_timetable()

        check.equal(len(week["monday"]), 1)
        slot = week["monday"][0]
        check.is_instance(slot, TimetableEntry)
        check.equal((slot.id, slot.activity, slot.color), ("slot-1", "Yoga", "#3B82F6"))

        await planner.delete_timetable_entry("slot-1")
        check.equal((await planner.get_week_timetable())["monday"], [])

    async def test_overlapping_activity_is_not_sent(
        self, planner: PlannerApiClient, backend_state: BackendState
    ) -> None:
        await planner.add_timetable_entry(
            TimetableEntryInput(day="friday", start_time="14:00", end_time="15:00", activity="Gym")
        )
        scheduled = (await planner.get_week_timetable())["friday"]

        with pytest.raises(TimetableConflictError):
            await planner.add_timetable_entry(
                TimetableEntryInput(
                    day="friday", start_time="14:30", end_time="16:00", activity="Study"
                ),
                scheduled,
            )

        check.equal(backend_state.count("POST /api/timetable"), 1)

    async def test_touching_activity_is_accepted(
        self, planner: PlannerApiClient, backend_state: BackendState
    ) -> None:
        await planner.add_timetable_entry(
            TimetableEntryInput(day="friday", start_time="14:00", end_time="15:00", activity="Gym")
        )
        scheduled = (await planner.get_week_timetable())["friday"]

        await planner.add_timetable_entry(
            TimetableEntryInput(day="friday", start_time="15:00", end_time="16:00", activity="Read"),
            scheduled,
        )

        check.equal(backend_state.count("POST /api/timetable"), 2)

    async def test_rejected_token_while_editing(
        self,
        planner: PlannerApiClient,
        credentials: InMemoryCredentialProvider,
        backend_state: BackendState,
    ) -> None:
        backend_state.token = "rotated-token"

        with pytest.raises(AuthenticationRequired):
            await planner.create_todo(TodoInput(title="Walk"))

        assert credentials.get_token() is None


class TestEmotionClient:
    """Tests for EmotionApiClient."""

    @pytest.fixture
    def emotions(
        self,
        client_config: ClientConfig,
        credentials: InMemoryCredentialProvider,
        backend_transport: httpx.ASGITransport,
    ) -> EmotionApiClient:
        return EmotionApiClient(
            config=client_config, credentials=credentials, transport=backend_transport
        )

    async def test_log_then_list(
        self, emotions: EmotionApiClient, backend_state: BackendState
    ) -> None:
        await emotions.log_emotion(
            EmotionLogInput(mood="Hopeful", intensity=7, location="Home", activity="Working")
        )

        logs = await emotions.list_logs()

        check.equal(backend_state.last_body["intensity"], 7)
        check.equal(len(logs), 1)
        check.equal(logs[0].id, "emotion-1")
        check.equal(logs[0].mood, "Hopeful")
        check.equal(logs[0].context, ["Home", "Working"])
        check.equal(logs[0].timestamp.year, 2026)

    async def test_unexpected_log_payload_is_empty(
        self, emotions: EmotionApiClient, backend_state: BackendState
    ) -> None:
        backend_state.emotion_logs = {"error": "boom"}

        assert await emotions.list_logs() == []

    async def test_fresh_user_gets_default_choices(self, emotions: EmotionApiClient) -> None:
        options = await emotions.get_user_options()

        check.equal(options.choices("location"), ["Home", "Work", "Outside"])
        check.equal(options.choices("company"), ["Friends", "Family", "Alone"])

    async def test_add_custom_option(
        self, emotions: EmotionApiClient, backend_state: BackendState
    ) -> None:
        options = await emotions.add_user_option("location", "  Library ")

        check.equal(backend_state.user_options, {"locations": ["Library"]})
        check.equal(options.choices("location"), ["Home", "Work", "Outside", "Library"])

    async def test_blank_custom_option_is_not_sent(
        self, emotions: EmotionApiClient, backend_state: BackendState
    ) -> None:
        with pytest.raises(ValidationError):
            await emotions.add_user_option("company", "   ")

        assert backend_state.count("POST /api/user-options") == 0
