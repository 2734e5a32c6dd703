"""Audit configuration dataclass.

Everything about the audited project is supplied here: nothing is read from
module-level state.  A config can be built in code, from a mapping, or from
a YAML file such as::

    root: ..
    source_folders:
      - MoneyTracker.Universal
      - MoneyTracker.Universal.Core
    source_extensions: [cs, xaml]
    lines_folder: MoneyTracker.Universal.Core/Strings
    reference_file: en-US/Resources.resw
    exempt_keys: [NewsContent]
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from resw_audit.errors import ConfigurationError

DEFAULT_SOURCE_EXTENSIONS: tuple[str, ...] = (".cs", ".xaml")

# Generated accessor class; it names every key and would mark all of them used.
DEFAULT_IGNORE_FILES: tuple[str, ...] = ("Strings.cs",)

DEFAULT_LOCALE_EXTENSION = ".resw"
DEFAULT_UNTRANSLATED_PREFIX = "Check"


def normalize_extension(ext: str) -> str:
    """``"CS"`` / ``".cs"`` / ``"cs"`` → ``".cs"``."""
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def _as_tuple(value: Any, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(v) for v in value)
    raise ConfigurationError(None, f"'{name}' must be a string or a list of strings")


@dataclass(frozen=True)
class AuditConfig:
    """Immutable audit configuration.

    ``source_folders`` and ``lines_folder`` are relative to ``root`` (absolute
    paths are kept as-is); ``reference_file`` is relative to ``lines_folder``.
    """

    root: Path
    lines_folder: Path
    reference_file: Path
    source_folders: tuple[Path, ...] = (Path("."),)
    source_extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS
    ignore_files: frozenset[str] = frozenset(DEFAULT_IGNORE_FILES)
    ignore_dirs: frozenset[str] = frozenset()
    locale_extension: str = DEFAULT_LOCALE_EXTENSION
    exempt_keys: frozenset[str] = field(default_factory=frozenset)
    untranslated_prefix: str = DEFAULT_UNTRANSLATED_PREFIX
    workers: int | None = None
    fail_fast: bool = False

    def __post_init__(self) -> None:
        # Coerce loosely-typed input so callers may pass str/list.
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "lines_folder", Path(self.lines_folder))
        object.__setattr__(self, "reference_file", Path(self.reference_file))
        object.__setattr__(
            self,
            "source_folders",
            tuple(Path(p) for p in _as_tuple_paths(self.source_folders)),
        )
        object.__setattr__(
            self,
            "source_extensions",
            tuple(normalize_extension(e) for e in _as_tuple(self.source_extensions, "source_extensions")),
        )
        object.__setattr__(
            self, "ignore_files", frozenset(_as_tuple(self.ignore_files, "ignore_files"))
        )
        object.__setattr__(
            self, "ignore_dirs", frozenset(_as_tuple(self.ignore_dirs, "ignore_dirs"))
        )
        object.__setattr__(self, "locale_extension", normalize_extension(self.locale_extension))
        object.__setattr__(
            self, "exempt_keys", frozenset(_as_tuple(self.exempt_keys, "exempt_keys"))
        )

    # ── constructors ────────────────────────────────────────────────

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, base_dir: Path | None = None
    ) -> "AuditConfig":
        """Build a config from a plain mapping; unknown keys are ignored.

        A relative ``root`` is resolved against *base_dir* when given.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in names and v is not None}
        for required in ("root", "lines_folder", "reference_file"):
            if required not in kwargs:
                raise ConfigurationError(None, f"missing required setting '{required}'")
        root = Path(kwargs["root"])
        if base_dir is not None and not root.is_absolute():
            kwargs["root"] = base_dir / root
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> "AuditConfig":
        """Load configuration from a YAML file."""
        import yaml

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as exc:
            raise ConfigurationError(path, f"cannot read config file ({exc})") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(path, f"invalid YAML ({exc})") from exc

        if not isinstance(data, Mapping):
            raise ConfigurationError(path, "top level of the config file must be a mapping")
        return cls.from_mapping(data, base_dir=path.resolve().parent)

    def with_overrides(self, **overrides: Any) -> "AuditConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes) if changes else self

    # ── resolved paths ──────────────────────────────────────────────

    def source_paths(self) -> list[Path]:
        return [self.root / folder for folder in self.source_folders]

    def lines_path(self) -> Path:
        return self.root / self.lines_folder

    def reference_path(self) -> Path:
        return self.lines_path() / self.reference_file

    # ── validation ──────────────────────────────────────────────────

    def validate(self) -> "AuditConfig":
        """Check that every configured path exists; returns ``self``."""
        if not self.root.is_dir():
            raise ConfigurationError(self.root, "root directory does not exist")
        for folder in self.source_paths():
            if not folder.is_dir():
                raise ConfigurationError(folder, "source folder does not exist")
        if not self.lines_path().is_dir():
            raise ConfigurationError(self.lines_path(), "resource folder does not exist")
        if not self.reference_path().is_file():
            raise ConfigurationError(self.reference_path(), "reference file does not exist")
        if not self.source_extensions:
            raise ConfigurationError(None, "at least one source extension is required")
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(None, f"workers must be >= 1 (got {self.workers})")
        return self

    def describe(self) -> dict[str, Any]:
        """JSON-friendly summary echoed into audit results."""
        return {
            "root": self.root.as_posix(),
            "source_folders": [p.as_posix() for p in self.source_folders],
            "source_extensions": list(self.source_extensions),
            "ignore_files": sorted(self.ignore_files),
            "ignore_dirs": sorted(self.ignore_dirs),
            "lines_folder": self.lines_folder.as_posix(),
            "reference_file": self.reference_file.as_posix(),
            "exempt_keys": sorted(self.exempt_keys),
        }


def _as_tuple_paths(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (str, Path)):
        return (value,)
    return tuple(value)
