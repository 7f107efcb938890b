"""Template Pydantic models — pure data, no I/O."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

_EXTRA_FRACTION = re.compile(r'(\.\d{6})\d+')


def local_now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def _alias(camel: str) -> AliasChoices:
    # Older data files were written with PascalCase keys.
    return AliasChoices(camel, camel[0].upper() + camel[1:])


class Template(BaseModel):
    """A stored reusable text snippet."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    id: int = Field(default=0, validation_alias=_alias('id'), serialization_alias='id')
    title: str = Field(default='', validation_alias=_alias('title'), serialization_alias='title')
    body: str = Field(default='', validation_alias=_alias('body'), serialization_alias='body')
    section: str = Field(default='', validation_alias=_alias('section'), serialization_alias='section')
    summary: str = Field(default='', validation_alias=_alias('summary'), serialization_alias='summary')
    created_at: datetime = Field(
        default_factory=local_now,
        validation_alias=_alias('createdAt'),
        serialization_alias='createdAt',
    )
    updated_at: datetime = Field(
        default_factory=local_now,
        validation_alias=_alias('updatedAt'),
        serialization_alias='updatedAt',
    )

    @field_validator('title', 'body', 'section', 'summary', mode='before')
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return '' if value is None else value

    @field_validator('created_at', 'updated_at', mode='before')
    @classmethod
    def _trim_fraction(cls, value: object) -> object:
        # Seven fractional digits (100 ns ticks) appear in older files; keep microseconds.
        if isinstance(value, str):
            return _EXTRA_FRACTION.sub(r'\1', value, count=1)
        return value

    @field_validator('created_at', 'updated_at')
    @classmethod
    def _assume_local(cls, value: datetime) -> datetime:
        # Offset-less stamps from older files are local time.
        return value if value.tzinfo is not None else value.astimezone()


class TemplateDraft(BaseModel):
    """User-entered fields for creating or editing a template."""

    id: int | None = None  # set when editing an existing template
    title: str
    section: str
    body: str

    @field_validator('title', 'section')
    @classmethod
    def _strip_required(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f'{info.field_name} must not be blank')
        return value

    @field_validator('body')
    @classmethod
    def _body_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('body must not be blank')
        return value

    @classmethod
    def from_template(cls, template: Template) -> TemplateDraft:
        return cls(id=template.id, title=template.title, section=template.section, body=template.body)


class TemplateStore(BaseModel):
    """Ordered templates plus the monotonic id counter, as persisted on disk."""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    templates: list[Template] = Field(
        default_factory=list,
        validation_alias=_alias('templates'),
        serialization_alias='templates',
    )
    next_id: int = Field(default=1, validation_alias=_alias('nextId'), serialization_alias='nextId')

    @field_validator('templates', mode='before')
    @classmethod
    def _none_as_list(cls, value: object) -> object:
        return [] if value is None else value

    @model_validator(mode='after')
    def _check_ids(self) -> TemplateStore:
        seen: set[int] = set()
        for tmpl in self.templates:
            if tmpl.id in seen:
                raise ValueError(f'Duplicate template id {tmpl.id}')
            seen.add(tmpl.id)
        highest = max(seen, default=0)
        if self.next_id <= highest:
            self.next_id = highest + 1
        return self

    def find(self, template_id: int) -> Template | None:
        return next((t for t in self.templates if t.id == template_id), None)

    def to_json(self) -> str:
        """Serialize as indented JSON; non-ASCII text is written as-is."""
        return self.model_dump_json(by_alias=True, indent=2)
