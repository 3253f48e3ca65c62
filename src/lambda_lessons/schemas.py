# src/lambda_lessons/schemas.py

"""
Request and response models shared by the lesson handlers.

Field names are snake_case in Python and PascalCase on the wire, matching the
payloads the functions were originally invoked with. Both spellings are
accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

OLD_AGE_THRESHOLD = 50


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class Item(WireModel):
    """A stored record: caller-supplied identity and a display name."""

    id: str
    name: str


class ItemRequest(Item):
    """An item arriving from a caller; new writes must carry an id."""

    id: str = Field(..., min_length=1)


class Result(WireModel):
    success: bool


class GreetingInput(WireModel):
    name: str
    age: int


class GreetingOutput(WireModel):
    name: str
    old: bool

    @classmethod
    def from_input(cls, greeting: GreetingInput) -> "GreetingOutput":
        return cls(name=greeting.name, old=greeting.age > OLD_AGE_THRESHOLD)


class GreetingMessage(WireModel):
    message: str

    @classmethod
    def from_output(cls, output: GreetingOutput) -> "GreetingMessage":
        return cls(
            message=f"Dear {output.name}, you are {'' if output.old else 'not '}old."
        )
