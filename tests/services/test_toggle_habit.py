"""Toggle Habit — PATCH /habits/{id}/toggle flips today's completion.

Invariants:
    - Always targets start-of-day of the server clock
    - Two toggles return to the original state
    - The Day row is created once per date and never deleted
    - Non-UUID ids rejected with 400
"""

from datetime import datetime

from sqlalchemy import func, select

from habitrack.models.day import Day, DayHabit


async def test_first_toggle_completes_habit_today(client, create_habit):
    habit = await create_habit("Meditate", [1])

    res = await client.patch(f"/habits/{habit['id']}/toggle")
    assert res.status_code == 200
    assert res.json() == {
        "habitId": habit["id"],
        "date": "2023-01-16T00:00:00",
        "completed": True,
    }


async def test_second_toggle_restores_original_state(client, create_habit, test_db):
    habit = await create_habit("Meditate", [1])

    await client.patch(f"/habits/{habit['id']}/toggle")
    res = await client.patch(f"/habits/{habit['id']}/toggle")
    assert res.json()["completed"] is False

    result = await test_db.execute(select(func.count()).select_from(DayHabit))
    assert result.scalar_one() == 0


async def test_day_row_created_once_and_kept(client, create_habit, test_db):
    first = await create_habit("Meditate", [1])
    second = await create_habit("Journal", [1])

    await client.patch(f"/habits/{first['id']}/toggle")
    await client.patch(f"/habits/{second['id']}/toggle")
    await client.patch(f"/habits/{first['id']}/toggle")

    result = await test_db.execute(select(Day.date))
    assert result.scalars().all() == [datetime(2023, 1, 16)]
    result = await test_db.execute(select(func.count()).select_from(DayHabit))
    assert result.scalar_one() == 1


async def test_toggle_targets_today_not_creation_day(client, create_habit, clock, test_db):
    habit = await create_habit("Meditate", [1, 2])

    await client.patch(f"/habits/{habit['id']}/toggle")
    clock.now = datetime(2023, 1, 17, 23, 59)
    res = await client.patch(f"/habits/{habit['id']}/toggle")

    assert res.json()["date"] == "2023-01-17T00:00:00"
    assert res.json()["completed"] is True
    result = await test_db.execute(select(Day.date).order_by(Day.date))
    assert result.scalars().all() == [datetime(2023, 1, 16), datetime(2023, 1, 17)]


async def test_toggle_shows_up_in_day_view(client, create_habit):
    habit = await create_habit("Meditate", [1])

    await client.patch(f"/habits/{habit['id']}/toggle")
    res = await client.get("/day", params={"date": "2023-01-16T18:00:00"})
    assert res.json()["completedHabits"] == [habit["id"]]

    await client.patch(f"/habits/{habit['id']}/toggle")
    res = await client.get("/day", params={"date": "2023-01-16T18:00:00"})
    assert res.json()["completedHabits"] == []


async def test_invalid_uuid_rejected(client, test_db):
    res = await client.patch("/habits/not-a-uuid/toggle")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "path.habit_id"

    result = await test_db.execute(select(func.count()).select_from(Day))
    assert result.scalar_one() == 0
