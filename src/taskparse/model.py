"""
Value types produced by the argument grammar.

These are plain data: a Filter says which tasks a command applies to, a
Modification says what to change on them, and a Report says what to list.
All of them are immutable pydantic models with "no change" / "default set"
defaults, so an empty value is always safe to hand to the task store.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Status(Enum):
    """Lifecycle status of a task."""

    PENDING = "pending"
    COMPLETED = "completed"
    DELETED = "deleted"


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


class DescriptionModKind(Enum):
    UNSET = "unset"
    SET = "set"
    APPEND = "append"
    PREPEND = "prepend"


class DescriptionMod(_Value):
    """How a command changes a task's description."""

    kind: DescriptionModKind = DescriptionModKind.UNSET
    text: str | None = None

    @model_validator(mode="after")
    def check_text_matches_kind(self) -> "DescriptionMod":
        # Unset carries no text; every other kind carries some
        if self.kind is DescriptionModKind.UNSET:
            if self.text is not None:
                raise ValueError("an unset description has no text")
        elif self.text is None:
            raise ValueError(f"a {self.kind.value} description needs text")
        return self

    @classmethod
    def unset(cls) -> "DescriptionMod":
        return cls()

    @classmethod
    def set(cls, text: str) -> "DescriptionMod":
        return cls(kind=DescriptionModKind.SET, text=text)

    @classmethod
    def append(cls, text: str) -> "DescriptionMod":
        return cls(kind=DescriptionModKind.APPEND, text=text)

    @classmethod
    def prepend(cls, text: str) -> "DescriptionMod":
        return cls(kind=DescriptionModKind.PREPEND, text=text)

    @property
    def is_set(self) -> bool:
        return self.kind is DescriptionModKind.SET

    def __str__(self) -> str:
        if self.kind is DescriptionModKind.UNSET:
            return "unset"
        return f"{self.kind.value}({self.text!r})"


class Modification(_Value):
    """
    A bundle of optional field changes to apply to selected tasks.

    Params:
        description: Description change, unset by default
        status: New status, or None to leave it alone
        active: True to start, False to stop, None to leave it alone
        add_tags: Tags to add
        remove_tags: Tags to remove
    """

    description: DescriptionMod = Field(default_factory=DescriptionMod.unset)
    status: Status | None = None
    active: bool | None = None
    add_tags: frozenset[str] = frozenset()
    remove_tags: frozenset[str] = frozenset()


class WorkingSetId(_Value):
    """A short numeric id from the working set."""

    id: int = Field(gt=0)

    def __str__(self) -> str:
        return str(self.id)


class PartialUuid(_Value):
    """A (possibly abbreviated) task UUID."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


TaskId = WorkingSetId | PartialUuid


class UniverseKind(Enum):
    PENDING_TASKS = "pending_tasks"
    ID_LIST = "id_list"


class Universe(_Value):
    """The base set of tasks a filter starts from."""

    kind: UniverseKind = UniverseKind.PENDING_TASKS
    ids: tuple[TaskId, ...] = ()

    @classmethod
    def pending_tasks(cls) -> "Universe":
        return cls()

    @classmethod
    def id_list(cls, ids: list[TaskId]) -> "Universe":
        return cls(kind=UniverseKind.ID_LIST, ids=tuple(ids))

    @classmethod
    def for_ids(cls, ids: list[int]) -> "Universe":
        """Shorthand for an id list made only of working-set ids."""
        return cls.id_list([WorkingSetId(id=i) for i in ids])


class HasTag(_Value):
    tag: str


class NoTag(_Value):
    tag: str


class StatusIs(_Value):
    status: Status


Condition = HasTag | NoTag | StatusIs


class Filter(_Value):
    """
    A selection criterion identifying which tasks a command applies to.

    Params:
        universe: The base task set (pending tasks unless ids were given)
        conditions: Additional predicates every selected task must satisfy
    """

    universe: Universe = Field(default_factory=Universe.pending_tasks)
    conditions: tuple[Condition, ...] = ()


class Report(_Value):
    """A listing request; currently just the filter to list."""

    filter: Filter = Field(default_factory=Filter)
