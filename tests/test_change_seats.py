"""
Unit tests for the ChangeSeats use case.

Runs against InMemoryWebinarRepository; each failing scenario also checks
that the stored webinar still has its original 100 seats.
"""
import pytest

from webinars.application.change_seats import ChangeSeats
from webinars.domain.entities import (
    SeatsValidationError,
    WebinarForbiddenError,
    WebinarNotFoundError,
)
from webinars.repositories.in_memory_webinar_repository import InMemoryWebinarRepository
from webinars.seeds import alice, bob


@pytest.fixture
def repository(webinar):
    return InMemoryWebinarRepository([webinar])


@pytest.fixture
def use_case(repository):
    return ChangeSeats(repository)


def assert_webinar_unchanged(repository, webinar):
    stored = repository.find_by_id_sync("webinar-id")
    assert stored == webinar
    assert stored.seats == 100


# ============================================
# Happy path
# ============================================

@pytest.mark.asyncio
async def test_organizer_can_increase_seats(use_case, repository):
    await use_case.execute(user=alice, webinar_id="webinar-id", seats=200)

    updated = await repository.find_by_id("webinar-id")
    assert updated.seats == 200


@pytest.mark.asyncio
async def test_only_seats_change(use_case, repository, webinar):
    result = await use_case.execute(user=alice, webinar_id="webinar-id", seats=200)

    stored = repository.find_by_id_sync("webinar-id")
    assert stored == result
    assert stored.organizer_id == webinar.organizer_id
    assert stored.title == webinar.title
    assert stored.start_date == webinar.start_date
    assert stored.end_date == webinar.end_date


@pytest.mark.asyncio
async def test_same_seat_count_is_accepted(use_case, repository):
    result = await use_case.execute(user=alice, webinar_id="webinar-id", seats=100)

    assert result.seats == 100
    assert repository.find_by_id_sync("webinar-id").seats == 100


@pytest.mark.asyncio
async def test_seat_cap_is_inclusive(use_case, repository):
    await use_case.execute(user=alice, webinar_id="webinar-id", seats=1000)

    assert repository.find_by_id_sync("webinar-id").seats == 1000


# ============================================
# Failures
# ============================================

@pytest.mark.asyncio
async def test_webinar_does_not_exist(use_case, repository, webinar):
    with pytest.raises(WebinarNotFoundError, match="Webinar not found"):
        await use_case.execute(user=alice, webinar_id="imaginary-id", seats=200)

    assert_webinar_unchanged(repository, webinar)


@pytest.mark.asyncio
async def test_user_is_not_the_organizer(use_case, repository, webinar):
    with pytest.raises(WebinarForbiddenError, match="User is not allowed to update this webinar"):
        await use_case.execute(user=bob, webinar_id="webinar-id", seats=201)

    assert_webinar_unchanged(repository, webinar)


@pytest.mark.asyncio
async def test_cannot_reduce_seats(use_case, repository, webinar):
    with pytest.raises(SeatsValidationError, match="You cannot reduce the number of seats"):
        await use_case.execute(user=alice, webinar_id="webinar-id", seats=99)

    assert_webinar_unchanged(repository, webinar)


@pytest.mark.asyncio
async def test_cannot_exceed_seat_cap(use_case, repository, webinar):
    with pytest.raises(SeatsValidationError, match="Webinar must have at most 1000 seats"):
        await use_case.execute(user=alice, webinar_id="webinar-id", seats=1001)

    assert_webinar_unchanged(repository, webinar)


@pytest.mark.asyncio
@pytest.mark.parametrize("seats", [0, 50, 99])
async def test_reductions_never_write(use_case, repository, webinar, seats):
    with pytest.raises(SeatsValidationError):
        await use_case.execute(user=alice, webinar_id="webinar-id", seats=seats)

    assert_webinar_unchanged(repository, webinar)


@pytest.mark.asyncio
async def test_organizer_check_runs_before_seat_rules(use_case, repository, webinar):
    """A non-organizer asking for an invalid count is rejected as forbidden"""
    with pytest.raises(WebinarForbiddenError):
        await use_case.execute(user=bob, webinar_id="webinar-id", seats=5000)

    assert_webinar_unchanged(repository, webinar)


@pytest.mark.asyncio
async def test_error_messages_are_exact(use_case):
    with pytest.raises(SeatsValidationError) as exc_info:
        await use_case.execute(user=alice, webinar_id="webinar-id", seats=1001)

    assert str(exc_info.value) == "Webinar must have at most 1000 seats"


@pytest.mark.asyncio
async def test_scenario_sequence(use_case, repository):
    """alice raises to 200; bob, a reduction and an overflow are all rejected"""
    await use_case.execute(user=alice, webinar_id="webinar-id", seats=200)
    assert repository.find_by_id_sync("webinar-id").seats == 200

    with pytest.raises(WebinarForbiddenError):
        await use_case.execute(user=bob, webinar_id="webinar-id", seats=201)
    with pytest.raises(SeatsValidationError):
        await use_case.execute(user=alice, webinar_id="webinar-id", seats=199)
    with pytest.raises(SeatsValidationError):
        await use_case.execute(user=alice, webinar_id="webinar-id", seats=1001)

    assert repository.find_by_id_sync("webinar-id").seats == 200
