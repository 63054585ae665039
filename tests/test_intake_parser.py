from datetime import date, timedelta

from taskpilot.schemas.task import Priority, Status
from taskpilot.services.intake_parser import parse, split_date_clause, detect_priority

TODAY = date(2024, 3, 15)


class TestTitleAndDate:

    def test_empty_text(self):
        draft = parse("")
        assert draft.title == ""
        assert draft.due_date is None
        assert draft.priority == Priority.MEDIUM

    def test_no_separator_keeps_whole_text(self):
        # les mots de date hors clause " by " ne sont pas extraits
        draft = parse("Call John tomorrow")
        assert draft.title == "Call John tomorrow"
        assert draft.due_date is None

    def test_by_tomorrow(self):
        draft = parse("Finish report by tomorrow")
        assert draft.title == "Finish report"
        assert draft.due_date == date.today() + timedelta(days=1)
        assert draft.priority == Priority.MEDIUM

    def test_by_next_week(self):
        draft = parse("Finish report by next week")
        assert draft.due_date == date.today() + timedelta(days=7)

    def test_by_today_with_injected_date(self):
        draft = parse("Send invoice by today", today=TODAY)
        assert draft.title == "Send invoice"
        assert draft.due_date == TODAY

    def test_tomorrow_wins_over_today(self):
        draft = parse("Pay rent by today or tomorrow", today=TODAY)
        assert draft.due_date == TODAY + timedelta(days=1)

    def test_unknown_clause_is_dropped(self):
        draft = parse("Book flights by Friday", today=TODAY)
        assert draft.title == "Book flights"
        assert draft.due_date is None

    def test_split_on_first_separator(self):
        title, clause = split_date_clause("Stand by me by tomorrow")
        assert title == "Stand"
        assert clause == "me by tomorrow"
        assert parse("Stand by me by tomorrow", today=TODAY).due_date == TODAY + timedelta(days=1)

    def test_separator_case_insensitive(self):
        draft = parse("Finish slides BY Tomorrow", today=TODAY)
        assert draft.title == "Finish slides"
        assert draft.due_date == TODAY + timedelta(days=1)

    def test_title_is_trimmed(self):
        assert parse("   Water plants   ").title == "Water plants"
        assert parse("  Water plants  by today", today=TODAY).title == "Water plants"

    def test_non_ascii_title_before_separator(self):
        # "İ".lower() fait deux caractères
        draft = parse("İİ task by tomorrow", today=TODAY)
        assert draft.title == "İİ task"
        assert draft.due_date == TODAY + timedelta(days=1)

    def test_non_ascii_title_keeps_clause(self):
        title, clause = split_date_clause("Réunion ÉQUIPE İstanbul BY next week")
        assert title == "Réunion ÉQUIPE İstanbul"
        assert clause == "next week"


class TestPriority:

    def test_high_keywords(self):
        for text in ["URGENT call", "important meeting", "Critical bug fix"]:
            assert detect_priority(text) == Priority.HIGH

    def test_low_keywords(self):
        assert parse("Read article, low priority").priority == Priority.LOW
        assert parse("Clean garage when time permits").priority == Priority.LOW

    def test_high_checked_before_low(self):
        assert parse("This is urgent and low priority").priority == Priority.HIGH

    def test_priority_uses_whole_text(self):
        # le mot-clé peut être dans la clause de date
        draft = parse("Renew passport by next week, critical", today=TODAY)
        assert draft.priority == Priority.HIGH
        assert draft.due_date == TODAY + timedelta(days=7)


class TestDraftDefaults:

    def test_description_always_empty(self):
        assert parse("Write docs by tomorrow, important").description == ""

    def test_status_left_default(self):
        assert parse("Anything").status == Status.PENDING

    def test_idempotent(self):
        text = "Finish report by tomorrow, urgent"
        assert parse(text, today=TODAY) == parse(text, today=TODAY)
