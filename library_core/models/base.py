# library_core/models/base.py
from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """Base class for all models"""
    pass

def enum_values(enum_cls) -> list[str]:
    """Store enum values ('Active') rather than member names ('ACTIVE')"""
    return [member.value for member in enum_cls]
