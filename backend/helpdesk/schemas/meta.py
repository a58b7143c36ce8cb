from pydantic import BaseModel


class EnumLabel(BaseModel):
    value: str
    label: str
    style: str
    rank: int


class LabelTable(BaseModel):
    statuses: list[EnumLabel]
    priorities: list[EnumLabel]
