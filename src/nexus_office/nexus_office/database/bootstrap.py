from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Iterable, List, Optional

from ..attendance.factory import AttendanceStrategyFactory
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.ids import new_id
from ..core.constants import SEED_EXCLUDED_USER_IDS
from ..core.enums import Role
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)

PRESENT_PROBABILITY = 0.85
REMOTE_PROBABILITY = 0.30


def seed_today_attendance(
    attendance: AttendanceRepository,
    users: UserRepository,
    *,
    now: datetime,
    rng: Optional[random.Random] = None,
    strategy_factory: Optional[AttendanceStrategyFactory] = None,
    exclude_user_ids: Iterable[str] = SEED_EXCLUDED_USER_IDS,
) -> int:
    """Make today's attendance look lived-in.

    Does nothing when any record already exists for today. Otherwise each
    employee (minus the excluded ids) is present with ~85% chance, remote with
    ~30% of those, checking in at a random minute of the 8 or 9 o'clock hour.
    Returns the number of records created.
    """

    today = now.date()
    if attendance.list_for_date(today):
        return 0

    rng = rng or random.Random()
    factory = strategy_factory or AttendanceStrategyFactory()
    excluded = set(exclude_user_ids)

    created: List[AttendanceRecord] = []
    for user in users.list_all():
        if user.role != Role.EMPLOYEE or user.user_id in excluded:
            continue
        if rng.random() >= PRESENT_PROBABILITY:
            continue

        is_remote = rng.random() < REMOTE_PROBABILITY
        hour = 8 + (1 if rng.random() > 0.5 else 0)
        minute = rng.randrange(60)
        check_in = now.replace(hour=hour, minute=minute, second=0, microsecond=0)

        decision = factory.for_checkin(now=check_in, is_remote=is_remote).decide_checkin(
            now=check_in, is_remote=is_remote
        )
        created.append(
            AttendanceRecord(
                attendance_id=new_id(rng),
                user_id=user.user_id,
                work_date=today,
                check_in_time=check_in,
                check_out_time=None,
                status=decision.status,
                is_remote=is_remote,
            )
        )

    if created:
        attendance.add_many(created)
    logger.info("Seeded %d attendance record(s) for %s", len(created), today.isoformat())
    return len(created)
