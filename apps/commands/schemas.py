"""Request/response DTOs for the commands API (camelCase on the wire)."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from .models import Command


class CommandSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class CommandReadDto(CommandSchema):
    id: int
    how_to: str
    line: str
    platform: str

    @classmethod
    def to_response(cls, command: Command) -> dict:
        return cls.model_validate(command).model_dump(by_alias=True)


class CommandCreateDto(CommandSchema):
    how_to: str = Field(max_length=250)
    line: str
    platform: str

    def to_command(self) -> Command:
        return Command(how_to=self.how_to, line=self.line, platform=self.platform)


class CommandUpdateDto(CommandSchema):
    """Full replacement of a command's fields; the id comes from the URL."""
    how_to: str = Field(max_length=250)
    line: str
    platform: str

    def apply_to(self, command: Command) -> Command:
        command.how_to = self.how_to
        command.line = self.line
        command.platform = self.platform
        return command
