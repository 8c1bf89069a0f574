from typing import Any

from sqlalchemy.orm import as_declarative


@as_declarative()
class Base:
    id: Any
    __name__: str
    # Each model names its table explicitly
    __tablename__: str
