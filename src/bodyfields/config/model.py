# topmark:header:start
#
#   project      : BodyFields
#   file         : model.py
#   file_relpath : src/bodyfields/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, per-run snapshot consumed by the block composer.
    - `MutableConfig`: a mutable builder used while layering defaults, TOML
      files, GitHub Actions inputs and CLI overrides. It is frozen into a
      `Config` (validating option combinations) and can be thawed back.

Validation:
    `MutableConfig.freeze` raises `ConfigurationError` when:
      - ``title`` and ``title_from`` are both set;
      - ``title_from`` and ``append_to_values`` are both set;
      - ``content`` is combined with ``fields``, ``title_from`` or ``remove_fields``;
      - ``block_position`` is anything but ``"first"`` or ``"after"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from bodyfields.config.io import (
    extract_tool_table,
    get_bool_value_or_none,
    get_fields_value_or_none,
    get_list_value,
    get_string_value_or_none,
    load_toml_dict,
    split_list_input,
)
from bodyfields.config.keys import ActionInput, Toml
from bodyfields.config.logging import get_logger
from bodyfields.constants import DEFAULT_BLOCK_NAME
from bodyfields.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from bodyfields.config.io import TomlTable
    from bodyfields.config.logging import BodyfieldsLogger

logger: BodyfieldsLogger = get_logger(__name__)


class BlockPosition(str, Enum):
    """Where a newly created block goes in the document.

    FIRST: before all existing text.
    AFTER: right after the last existing block of any name (or first when there is none).
    """

    FIRST = "first"
    AFTER = "after"

    @classmethod
    def parse(cls, value: str | BlockPosition | None) -> BlockPosition:
        """Return the member for ``value`` (None selects the default, AFTER).

        Raises:
            ConfigurationError: If ``value`` is not exactly ``"first"`` or ``"after"``.
        """
        if value is None:
            return cls.AFTER
        if isinstance(value, BlockPosition):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise ConfigurationError(
            f"Invalid block-position '{value}': expected one of "
            f"{', '.join(repr(m.value) for m in cls)}."
        )


def _input_true(value: str | None) -> bool | None:
    """Action inputs are strings; only the literal ``true`` enables a flag."""
    if value is None:
        return None
    return value.strip() == "true"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable per-run configuration for BodyFields.

    Attributes:
        fields (str): Raw ``key: value`` lines to merge into the block.
        prepend (bool): Place brand-new fields before the existing ones.
        append_to_values (bool): Append values to existing keys instead of replacing them.
        title (str | None): Literal title for the document.
        title_from (str | None): Field key whose (merged) value becomes the title.
        remove_fields (tuple[str, ...]): Keys to delete from the block.
        header (str | None): Free text rendered above the fields.
        footer (str | None): Free text rendered below the fields.
        block_name (str): Block name; ``"default"`` renders unnamed markers.
        block_position (BlockPosition): Placement of a newly created block.
        content (str | None): Raw block content (replaces field handling).
        remove (bool): Remove the block entirely.
        config_files (tuple[str, ...]): Provenance of file-based layers.
    """

    fields: str
    prepend: bool
    append_to_values: bool
    title: str | None
    title_from: str | None
    remove_fields: tuple[str, ...]
    header: str | None
    footer: str | None
    block_name: str
    block_position: BlockPosition
    content: str | None
    remove: bool
    config_files: tuple[str, ...]

    @property
    def has_fields(self) -> bool:
        """Whether any field input was supplied."""
        return bool(self.fields.strip())

    @property
    def has_content(self) -> bool:
        """Whether raw content mode is active."""
        return bool(self.content)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            fields=self.fields,
            prepend=self.prepend,
            append_to_values=self.append_to_values,
            title=self.title,
            title_from=self.title_from,
            remove_fields=list(self.remove_fields),
            header=self.header,
            footer=self.footer,
            block_name=self.block_name,
            block_position=self.block_position.value,
            content=self.content,
            remove=self.remove,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while layering configuration sources.

    ``None`` means "not set by this layer" so that `merge_with` can tell an
    explicit value from an absent one.

    Attributes:
        fields (str | None): Raw ``key: value`` lines.
        prepend (bool | None): Place new fields first.
        append_to_values (bool | None): Append-to-values mode.
        title (str | None): Literal title.
        title_from (str | None): Field key providing the title.
        remove_fields (list[str]): Keys to remove.
        header (str | None): Header text override.
        footer (str | None): Footer text override.
        block_name (str | None): Block name.
        block_position (str | None): Raw block position, validated on freeze.
        content (str | None): Raw content.
        remove (bool | None): Remove the block.
        config_files (list[str]): Provenance of file-based layers.
    """

    fields: str | None = None
    prepend: bool | None = None
    append_to_values: bool | None = None
    title: str | None = None
    title_from: str | None = None
    remove_fields: list[str] = field(default_factory=lambda: [])
    header: str | None = None
    footer: str | None = None
    block_name: str | None = None
    block_position: str | None = None
    content: str | None = None
    remove: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def validate(self) -> None:
        """Check mutually exclusive options.

        Raises:
            ConfigurationError: On the first violated constraint.
        """
        if self.title and self.title_from:
            raise ConfigurationError("Options `title` and `title-from` are mutually exclusive.")
        if self.title_from and self.append_to_values:
            raise ConfigurationError(
                "Options `title-from` and `append-to-values` are mutually exclusive."
            )
        if self.content:
            conflicting: list[str] = []
            if self.fields and self.fields.strip():
                conflicting.append("fields")
            if self.title_from:
                conflicting.append("title-from")
            if self.remove_fields:
                conflicting.append("remove-fields")
            if conflicting:
                raise ConfigurationError(
                    "Option `content` cannot be combined with "
                    + ", ".join(f"`{name}`" for name in conflicting)
                    + "."
                )
        BlockPosition.parse(self.block_position)

    def freeze(self) -> Config:
        """Validate and freeze this builder into an immutable `Config`.

        Raises:
            ConfigurationError: If options conflict or ``block_position`` is invalid.
        """
        self.validate()
        config = Config(
            fields=self.fields or "",
            prepend=bool(self.prepend),
            append_to_values=bool(self.append_to_values),
            title=self.title or None,
            title_from=self.title_from or None,
            remove_fields=tuple(k for k in self.remove_fields if k),
            header=self.header or None,
            footer=self.footer or None,
            block_name=self.block_name or DEFAULT_BLOCK_NAME,
            block_position=BlockPosition.parse(self.block_position),
            content=self.content or None,
            remove=bool(self.remove),
            config_files=tuple(self.config_files),
        )
        logger.trace("Frozen config: %s", config)
        return config

    # ------------------------------- Merging ------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one.

        Scalars are taken from ``other`` when not ``None``; ``remove_fields``
        is replaced when ``other`` lists any; ``config_files`` accumulate.
        """
        merged = MutableConfig(
            remove_fields=list(other.remove_fields or self.remove_fields),
            config_files=[*self.config_files, *other.config_files],
        )
        for name in (
            "fields",
            "prepend",
            "append_to_values",
            "title",
            "title_from",
            "header",
            "footer",
            "block_name",
            "block_position",
            "content",
            "remove",
        ):
            value: Any = getattr(other, name)
            setattr(merged, name, value if value is not None else getattr(self, name))
        return merged

    def apply_overrides(self, **overrides: Any) -> MutableConfig:
        """Apply keyword overrides in place; ``None`` (or an empty sequence) keeps the value.

        Raises:
            TypeError: If an unknown option name is given.
        """
        for name, value in overrides.items():
            if not hasattr(self, name):
                raise TypeError(f"Unknown configuration option: {name}")
            if value is None:
                continue
            if name == "remove_fields":
                if value:
                    self.remove_fields = list(value)
                continue
            setattr(self, name, value)
        return self

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Create a draft config from a parsed BodyFields TOML table.

        Args:
            data (TomlTable): Table with keys from `bodyfields.config.keys.Toml`.

        Returns:
            MutableConfig: The resulting builder.
        """
        logger.trace("TOML table: %s", data)
        return cls(
            fields=get_fields_value_or_none(data, Toml.KEY_FIELDS),
            prepend=get_bool_value_or_none(data, Toml.KEY_PREPEND),
            append_to_values=get_bool_value_or_none(data, Toml.KEY_APPEND_TO_VALUES),
            title=get_string_value_or_none(data, Toml.KEY_TITLE),
            title_from=get_string_value_or_none(data, Toml.KEY_TITLE_FROM),
            remove_fields=get_list_value(data, Toml.KEY_REMOVE_FIELDS),
            header=get_string_value_or_none(data, Toml.KEY_HEADER),
            footer=get_string_value_or_none(data, Toml.KEY_FOOTER),
            block_name=get_string_value_or_none(data, Toml.KEY_BLOCK_NAME),
            block_position=get_string_value_or_none(data, Toml.KEY_BLOCK_POSITION),
            content=get_string_value_or_none(data, Toml.KEY_CONTENT),
            remove=get_bool_value_or_none(data, Toml.KEY_REMOVE),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load configuration from ``bodyfields.toml`` or ``[tool.bodyfields]`` in ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig: The builder; empty when the file could not be read.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable = extract_tool_table(path, load_toml_dict(path))
        draft: MutableConfig = cls.from_toml_dict(table)
        draft.config_files = [str(path)]
        return draft

    @classmethod
    def from_action_env(cls, environ: Mapping[str, str]) -> MutableConfig:
        """Create a draft config from GitHub Actions ``INPUT_*`` variables.

        Empty inputs count as unset, which is how the runner passes inputs the
        workflow did not provide.

        Args:
            environ (Mapping[str, str]): Environment mapping (usually ``os.environ``).

        Returns:
            MutableConfig: The resulting builder.
        """

        def get_input(name: str) -> str | None:
            value: str | None = environ.get(action_input_env_name(name))
            return value if value else None

        remove_fields_raw: str | None = get_input(ActionInput.REMOVE_FIELDS)
        fields_raw: str | None = get_input(ActionInput.FIELDS)
        return cls(
            fields=fields_raw.strip() if fields_raw else None,
            prepend=_input_true(get_input(ActionInput.PREPEND)),
            append_to_values=_input_true(get_input(ActionInput.APPEND_TO_VALUES)),
            title=get_input(ActionInput.TITLE),
            title_from=get_input(ActionInput.TITLE_FROM),
            remove_fields=split_list_input(remove_fields_raw) if remove_fields_raw else [],
            header=get_input(ActionInput.HEADER),
            footer=get_input(ActionInput.FOOTER),
            block_name=get_input(ActionInput.BLOCK_NAME),
            block_position=get_input(ActionInput.BLOCK_POSITION),
            content=get_input(ActionInput.CONTENT),
            remove=_input_true(get_input(ActionInput.REMOVE)),
        )


def action_input_env_name(name: str) -> str:
    """Return the environment variable holding action input ``name``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"
