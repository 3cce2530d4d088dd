from typing import Annotated
from pydantic import BaseModel, Field
from arena.model import UINT32_MAX, Command

UInt32 = Annotated[int, Field(ge=0, le=UINT32_MAX)]


class CommandIn(BaseModel):
    """Input record schema."""
    time: UInt32
    cmd: str = Field(min_length=1)
    p1: UInt32
    p2: UInt32
    p3: UInt32

    def to_command(self) -> Command:
        return Command(time=self.time, op=self.cmd, p1=self.p1, p2=self.p2, p3=self.p3)


class RecordCount(BaseModel):
    """Header holding the number of records that follow."""
    count: UInt32
