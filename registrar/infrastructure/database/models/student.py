# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student ORM model.

Students are reference data from the registration service's point of
view: they are looked up by SSN but never created or modified here.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registrar.infrastructure.database.models.base import Base


class Student(Base):
    """A student at the institution.

    Attributes:
        id: Generated integer primary key.
        name: Full name, e.g. "Jón Gunnarsson".
        ssn: National identity number, e.g. "1212882659". Unique.
    """

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    ssn: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Student {self.id} {self.ssn}>"
