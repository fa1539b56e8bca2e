"""Summary — GET /summary reports completed vs possible counts per tracked day.

Invariants:
    - One row per Day row; untracked dates never appear
    - completed = DayHabit rows of the day; amount = habits possible that day
    - completed and amount are distinct float columns
"""

from datetime import datetime


async def test_empty_summary(client):
    res = await client.get("/summary")
    assert res.status_code == 200
    assert res.json() == []


async def test_two_of_three_completed(client, create_habit):
    habits = [await create_habit(t, [1]) for t in ("A", "B", "C")]
    for habit in habits[:2]:
        await client.patch(f"/habits/{habit['id']}/toggle")

    rows = (await client.get("/summary")).json()
    assert len(rows) == 1
    assert rows[0]["date"] == "2023-01-16T00:00:00"
    assert rows[0]["completed"] == 2
    assert rows[0]["amount"] == 3
    assert isinstance(rows[0]["completed"], float)
    assert isinstance(rows[0]["amount"], float)


async def test_days_without_day_row_are_absent(client, create_habit, clock):
    habit = await create_habit("Daily", [0, 1, 2, 3, 4, 5, 6])
    await client.patch(f"/habits/{habit['id']}/toggle")
    clock.now = datetime(2023, 1, 19, 12, 0)
    await client.patch(f"/habits/{habit['id']}/toggle")

    rows = (await client.get("/summary")).json()
    assert [r["date"] for r in rows] == ["2023-01-16T00:00:00", "2023-01-19T00:00:00"]


async def test_amount_ignores_habits_created_later(client, create_habit, clock):
    first = await create_habit("First", [1])
    await client.patch(f"/habits/{first['id']}/toggle")

    clock.now = datetime(2023, 1, 23, 8, 0)
    second = await create_habit("Second", [1])
    await client.patch(f"/habits/{second['id']}/toggle")

    rows = (await client.get("/summary")).json()
    assert [(r["completed"], r["amount"]) for r in rows] == [(1, 1), (1, 2)]


async def test_amount_counts_only_matching_week_day(client, create_habit):
    monday = await create_habit("Monday", [1])
    await create_habit("Tuesday", [2])
    await client.patch(f"/habits/{monday['id']}/toggle")

    rows = (await client.get("/summary")).json()
    assert rows[0]["amount"] == 1


async def test_untoggled_day_keeps_zero_completed(client, create_habit):
    habit = await create_habit("Once", [1])
    await client.patch(f"/habits/{habit['id']}/toggle")
    await client.patch(f"/habits/{habit['id']}/toggle")

    rows = (await client.get("/summary")).json()
    assert rows[0]["completed"] == 0
    assert rows[0]["amount"] == 1


async def test_sunday_week_day_matches_day_view(client, create_habit, clock):
    clock.now = datetime(2023, 1, 15, 8, 0)
    habit = await create_habit("Rest", [0])
    await create_habit("Work", [1])
    await client.patch(f"/habits/{habit['id']}/toggle")

    day = (await client.get("/day", params={"date": "2023-01-15T00:00:00"})).json()
    rows = (await client.get("/summary")).json()
    assert len(day["possibleHabits"]) == 1
    assert rows[0]["amount"] == len(day["possibleHabits"])
    assert rows[0]["completed"] == len(day["completedHabits"])
