from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class AttendanceModel(str, Enum):
    """Which status set a deployment records.

    TWO_STATE folds late into present and excused into absent.
    """

    TWO_STATE = "two_state"
    FOUR_STATE = "four_state"

    @property
    def statuses(self) -> tuple[AttendanceStatus, ...]:
        if self is AttendanceModel.TWO_STATE:
            return (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT)
        return (
            AttendanceStatus.PRESENT,
            AttendanceStatus.ABSENT,
            AttendanceStatus.LATE,
            AttendanceStatus.EXCUSED,
        )

    def normalize(self, status: AttendanceStatus) -> AttendanceStatus:
        if self is AttendanceModel.TWO_STATE:
            if status == AttendanceStatus.LATE:
                return AttendanceStatus.PRESENT
            if status == AttendanceStatus.EXCUSED:
                return AttendanceStatus.ABSENT
        return status
