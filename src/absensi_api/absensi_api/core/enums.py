from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Peran pengguna untuk otorisasi."""

    KARYAWAN = "karyawan"
    SISWA = "siswa"


class AttendanceStatus(str, Enum):
    """Status kehadiran yang disimpan di tabel attendance."""

    PRESENT = "present"
    ABSENT = "absent"
    SICK = "sick"
    ALPA = "alpa"

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        return cls(str(value).strip().lower())


# group_by values accepted by the analysis endpoint
ANALYSIS_GROUPS = (Role.SISWA.value, Role.KARYAWAN.value)
