import pytest

from taskpilot.schemas.task import Priority
from taskpilot.services.suggestion_service import SuggestionEngine, suggest_subtasks


def titles(batch):
    return [s.title for s in batch]


@pytest.mark.asyncio
async def test_report_category():
    batch = await suggest_subtasks("Quarterly report")
    assert [(s.title, s.priority) for s in batch] == [
        ("Gather data for report", Priority.HIGH),
        ("Create outline for report", Priority.MEDIUM),
        ("Write first draft", Priority.MEDIUM),
        ("Review and revise report", Priority.MEDIUM),
        ("Format final document", Priority.LOW),
    ]


@pytest.mark.asyncio
async def test_project_category():
    batch = await suggest_subtasks("Kick off PROJECT Apollo")
    assert titles(batch) == [
        "Define project scope",
        "Create project timeline",
        "Assign team responsibilities",
        "Set up project tracking",
        "Schedule project meetings",
    ]
    assert batch[-1].priority == Priority.LOW


@pytest.mark.asyncio
async def test_presentation_category():
    batch = await suggest_subtasks("Board presentation")
    assert titles(batch)[0] == "Outline presentation structure"
    assert batch[3].title == "Practice delivery"
    assert batch[3].priority == Priority.HIGH
    assert len(batch) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["Plan the offsite", "Organize garage"])
async def test_planning_category(title):
    batch = await suggest_subtasks(title)
    assert titles(batch) == [
        "Brainstorm ideas",
        "Create initial plan",
        "Gather resources",
        "Implement plan",
        "Review and adjust",
    ]


@pytest.mark.asyncio
async def test_category_order_report_first():
    # "report" est testé avant "project"
    batch = await suggest_subtasks("Project status report")
    assert titles(batch)[0] == "Gather data for report"


@pytest.mark.asyncio
async def test_generic_fallback():
    batch = await suggest_subtasks("Family dinner")
    assert len(batch) == 4
    assert all("Family dinner" in s.title for s in batch)
    assert batch[0].title == 'Research for "Family dinner"'
    assert [s.priority for s in batch] == [Priority.MEDIUM, Priority.HIGH, Priority.HIGH, Priority.MEDIUM]


@pytest.mark.asyncio
async def test_description_not_inspected():
    batch = await suggest_subtasks("Family dinner", "prepare the quarterly report", owner_id=7)
    assert batch[0].title == 'Research for "Family dinner"'


@pytest.mark.asyncio
async def test_indexes_follow_batch_order():
    batch = await suggest_subtasks("Quarterly report")
    assert [s.index for s in batch] == [0, 1, 2, 3, 4]


@pytest.mark.asyncio
async def test_idempotent():
    assert await suggest_subtasks("Family dinner") == await suggest_subtasks("Family dinner")


@pytest.mark.asyncio
async def test_custom_rules():
    engine = SuggestionEngine(rules=[
        (("gym",), [("Pack bag", Priority.LOW)]),
        ((), lambda title: [(f"Do {title}", Priority.MEDIUM)]),
    ])
    assert titles(await engine.suggest("Gym session")) == ["Pack bag"]
    assert titles(await engine.suggest("Laundry")) == ["Do Laundry"]
