# topmark:header:start
#
#   project      : ManifestMark
#   file         : model.py
#   file_relpath : src/manifestmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Layered configuration for ManifestMark.

Two classes split the responsibilities the usual way:

* `MutableConfig` is a builder. Each layer (built-in defaults, a TOML file, CLI
  arguments) produces a draft whose unset fields are ``None``; drafts are merged
  with last-wins semantics.
* `Config` is the immutable snapshot produced by `MutableConfig.freeze`, with
  every default resolved.

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) Discovered config file (``manifestmark.toml`` or ``[tool.manifestmark]``)
    3) Extra config files passed via ``--config`` (in the order given)
    4) CLI arguments

Malformed values never raise: they are recorded as warnings in the draft's
`DiagnosticLog` and carried on the frozen `Config`. An unreadable config file is
recorded as an error.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from manifestmark.config.getters import (
    get_bool_checked,
    get_enum_checked,
    get_string_checked,
    get_string_list_checked,
    get_table_checked,
    warn_unknown_keys,
)
from manifestmark.config.keys import Toml
from manifestmark.config.loaders import discover_config_file, extract_config_table, parse_toml_file
from manifestmark.config.logging import get_logger
from manifestmark.config.types import AssetPolicy
from manifestmark.constants import (
    DEFAULT_ICONS_DIR,
    DEFAULT_INJECT_EXTENSIONS,
    DEFAULT_MANIFEST_FILENAME,
    DEFAULT_PUBLIC_DIR,
)
from manifestmark.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from manifestmark.manifest.model import ManifestConfig

if TYPE_CHECKING:
    from manifestmark.config.logging import ManifestmarkLogger

    from .types import ArgsLike, TomlTable

logger: ManifestmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        manifest (ManifestConfig): Manifest input; ``icons_dir`` is always set.
        public_dir (Path): Directory the manifest is written to and pages are scanned in.
        filename (str): Manifest filename (relative to ``public_dir``).
        inject_enabled (bool): Whether page files get the manifest link.
        inject_extensions (tuple[str, ...]): Page file extensions to process.
        crossorigin_credentials (bool): Whether the link requests credentials.
        inject_exclude (tuple[str, ...]): Gitignore-style patterns for pages to leave alone.
        validate_assets (bool): Whether icon files are checked for existence.
        asset_policy (AssetPolicy): What to do with missing icon files.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
        diagnostics (FrozenDiagnosticLog): Warnings raised while loading config.
    """

    manifest: ManifestConfig
    public_dir: Path
    filename: str
    inject_enabled: bool
    inject_extensions: tuple[str, ...]
    crossorigin_credentials: bool
    inject_exclude: tuple[str, ...]
    validate_assets: bool
    asset_policy: AssetPolicy
    config_files: tuple[Path, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @property
    def manifest_path(self) -> Path:
        """Filesystem path of the manifest file."""
        segments: list[str] = [s for s in self.filename.replace("\\", "/").split("/") if s]
        return self.public_dir.joinpath(*segments)

    @property
    def icons_dir(self) -> str:
        """The resolved icons directory."""
        return str(self.manifest.icons_dir)


@dataclass
class MutableConfig:
    """Mutable configuration draft.

    ``None`` means "not set by this layer"; `freeze` applies the built-in
    defaults to whatever is still unset after merging.
    """

    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    public_dir: Path | None = None
    filename: str | None = None
    inject_enabled: bool | None = None
    inject_extensions: list[str] | None = None
    crossorigin_credentials: bool | None = None
    inject_exclude: list[str] | None = None
    validate_assets: bool | None = None
    asset_policy: AssetPolicy | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding every built-in default."""
        return cls(
            manifest=ManifestConfig(icons_dir=DEFAULT_ICONS_DIR),
            public_dir=Path(DEFAULT_PUBLIC_DIR),
            filename=DEFAULT_MANIFEST_FILENAME,
            inject_enabled=True,
            inject_extensions=list(DEFAULT_INJECT_EXTENSIONS),
            crossorigin_credentials=False,
            inject_exclude=[],
            validate_assets=True,
            asset_policy=AssetPolicy.WARN,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from a TOML file.

        Args:
            path (Path): ``manifestmark.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or ``None`` when a ``pyproject.toml``
                holds no ``[tool.manifestmark]`` table. A file that cannot be read
                or parsed yields an empty draft carrying an error diagnostic.
        """
        try:
            data: TomlTable = parse_toml_file(path)
        except (OSError, ValueError) as exc:
            message: str = f"Cannot read config file {path}: {exc}"
            logger.error(message)
            failed = cls()
            failed.config_files.append(path)
            failed.diagnostics.add_error(message)
            return failed
        table: TomlTable | None = extract_config_table(path, data)
        if table is None:
            logger.debug("No ManifestMark table in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from a parsed ManifestMark table.

        A relative ``output.public_dir`` is resolved against the directory of
        ``config_file`` (when given).

        Args:
            data (TomlTable): The ManifestMark table (whole ``manifestmark.toml``
                or ``[tool.manifestmark]``).
            config_file (Path | None): Source file, used for path resolution and
                diagnostics.

        Returns:
            MutableConfig: The draft; malformed entries are recorded as warnings.
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics
        where: str = str(config_file) if config_file is not None else "<config>"
        if config_file is not None:
            draft.config_files.append(config_file)

        warn_unknown_keys(data, Toml.ALL_SECTIONS, where=where, diagnostics=diags)

        # [manifest]
        manifest_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_MANIFEST, where=where, diagnostics=diags
        )
        warn_unknown_keys(
            manifest_tbl,
            frozenset(ManifestConfig.field_names()),
            where=f"[{Toml.SECTION_MANIFEST}] of {where}",
            diagnostics=diags,
        )
        draft.manifest = ManifestConfig.from_mapping(manifest_tbl)

        # [output]
        output_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_OUTPUT, where=where, diagnostics=diags
        )
        warn_unknown_keys(
            output_tbl,
            Toml.OUTPUT_KEYS,
            where=f"[{Toml.SECTION_OUTPUT}] of {where}",
            diagnostics=diags,
        )
        public_dir: str | None = get_string_checked(
            output_tbl, Toml.KEY_PUBLIC_DIR, where=Toml.SECTION_OUTPUT, diagnostics=diags
        )
        if public_dir is not None:
            path = Path(public_dir)
            if not path.is_absolute() and config_file is not None:
                path = config_file.parent / path
            draft.public_dir = path
        draft.filename = get_string_checked(
            output_tbl, Toml.KEY_FILENAME, where=Toml.SECTION_OUTPUT, diagnostics=diags
        )

        # [inject]
        inject_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_INJECT, where=where, diagnostics=diags
        )
        warn_unknown_keys(
            inject_tbl,
            Toml.INJECT_KEYS,
            where=f"[{Toml.SECTION_INJECT}] of {where}",
            diagnostics=diags,
        )
        draft.inject_enabled = get_bool_checked(
            inject_tbl, Toml.KEY_ENABLED, where=Toml.SECTION_INJECT, diagnostics=diags
        )
        draft.inject_extensions = get_string_list_checked(
            inject_tbl, Toml.KEY_EXTENSIONS, where=Toml.SECTION_INJECT, diagnostics=diags
        )
        draft.crossorigin_credentials = get_bool_checked(
            inject_tbl,
            Toml.KEY_CROSSORIGIN_CREDENTIALS,
            where=Toml.SECTION_INJECT,
            diagnostics=diags,
        )
        draft.inject_exclude = get_string_list_checked(
            inject_tbl, Toml.KEY_EXCLUDE, where=Toml.SECTION_INJECT, diagnostics=diags
        )

        # [assets]
        assets_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_ASSETS, where=where, diagnostics=diags
        )
        warn_unknown_keys(
            assets_tbl,
            Toml.ASSETS_KEYS,
            where=f"[{Toml.SECTION_ASSETS}] of {where}",
            diagnostics=diags,
        )
        draft.validate_assets = get_bool_checked(
            assets_tbl, Toml.KEY_VALIDATE, where=Toml.SECTION_ASSETS, diagnostics=diags
        )
        draft.asset_policy = get_enum_checked(
            assets_tbl, Toml.KEY_POLICY, AssetPolicy, where=Toml.SECTION_ASSETS, diagnostics=diags
        )

        logger.debug("Loaded config draft from %s", where)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, the discovered config file and extra config files.

        Args:
            start (Path | None): Directory where discovery begins (CWD if ``None``).
            extra_config_files (Iterable[Path] | None): Files merged after discovery,
                in the given order.
            no_config (bool): Skip discovery (extra files are still merged).

        Returns:
            MutableConfig: The merged draft, ready for `apply_args` and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            discovered: Path | None = discover_config_file(start or Path.cwd())
            if discovered is not None:
                layer: MutableConfig | None = cls.from_toml_file(discovered)
                if layer is not None:
                    draft = draft.merge_with(layer)

        for extra in extra_config_files or ():
            path = Path(extra)
            if not path.is_file():
                message: str = f"Config file not found: {path}"
                logger.warning(message)
                draft.diagnostics.add_warning(message)
                continue
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged draft. Config files and diagnostics are
                concatenated.
        """
        diagnostics = DiagnosticLog()
        diagnostics.extend(self.diagnostics)
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            manifest=self.manifest.merged_with(other.manifest),
            public_dir=other.public_dir if other.public_dir is not None else self.public_dir,
            filename=other.filename if other.filename is not None else self.filename,
            inject_enabled=other.inject_enabled
            if other.inject_enabled is not None
            else self.inject_enabled,
            inject_extensions=other.inject_extensions
            if other.inject_extensions is not None
            else self.inject_extensions,
            crossorigin_credentials=other.crossorigin_credentials
            if other.crossorigin_credentials is not None
            else self.crossorigin_credentials,
            inject_exclude=other.inject_exclude
            if other.inject_exclude is not None
            else self.inject_exclude,
            validate_assets=other.validate_assets
            if other.validate_assets is not None
            else self.validate_assets,
            asset_policy=other.asset_policy
            if other.asset_policy is not None
            else self.asset_policy,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay CLI-style arguments onto this draft (in place).

        Recognized keys are the `ManifestConfig` field names plus ``public_dir``,
        ``filename``, ``inject``, ``extensions``, ``crossorigin_credentials``,
        ``exclude``, ``validate_assets`` and ``asset_policy``. Keys whose value
        is ``None`` are left alone; a relative ``public_dir`` is taken relative
        to the current working directory.

        Args:
            args (ArgsLike): Mapping of argument values.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        overrides: dict[str, Any] = {
            name: args[name]
            for name in ManifestConfig.field_names()
            if args.get(name) is not None
        }
        if overrides:
            self.manifest = self.manifest.merged_with(ManifestConfig.from_mapping(overrides))

        if args.get("public_dir") is not None:
            self.public_dir = Path(args["public_dir"])
        if args.get("filename") is not None:
            self.filename = str(args["filename"])
        if args.get("inject") is not None:
            self.inject_enabled = bool(args["inject"])
        if args.get("extensions"):
            self.inject_extensions = [str(e) for e in args["extensions"]]
        if args.get("crossorigin_credentials") is not None:
            self.crossorigin_credentials = bool(args["crossorigin_credentials"])
        if args.get("exclude"):
            self.inject_exclude = [str(p) for p in args["exclude"]]
        if args.get("validate_assets") is not None:
            self.validate_assets = bool(args["validate_assets"])
        policy: Any = args.get("asset_policy")
        if isinstance(policy, AssetPolicy):
            self.asset_policy = policy
        elif isinstance(policy, str):
            resolved: AssetPolicy | None = AssetPolicy.from_value(policy)
            if resolved is None:
                message: str = f"Unknown asset policy {policy!r} (ignored)"
                logger.warning(message)
                self.diagnostics.add_warning(message)
            else:
                self.asset_policy = resolved
        return self

    # ------------------------------- Freezing ------------------------------
    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`, applying built-in defaults."""
        manifest: ManifestConfig = self.manifest
        if manifest.icons_dir is None:
            manifest = manifest.merged_with(ManifestConfig(icons_dir=DEFAULT_ICONS_DIR))

        extensions: list[str] = (
            self.inject_extensions
            if self.inject_extensions is not None
            else list(DEFAULT_INJECT_EXTENSIONS)
        )

        return Config(
            manifest=manifest,
            public_dir=self.public_dir if self.public_dir is not None else Path(DEFAULT_PUBLIC_DIR),
            filename=self.filename or DEFAULT_MANIFEST_FILENAME,
            inject_enabled=self.inject_enabled if self.inject_enabled is not None else True,
            inject_extensions=tuple(extensions),
            crossorigin_credentials=bool(self.crossorigin_credentials),
            inject_exclude=tuple(self.inject_exclude or ()),
            validate_assets=self.validate_assets if self.validate_assets is not None else True,
            asset_policy=self.asset_policy or AssetPolicy.WARN,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )


def config_from_mapping(data: Mapping[str, Any]) -> Config:
    """Build a `Config` from defaults plus a ManifestMark-shaped mapping (no file I/O)."""
    layer: MutableConfig = MutableConfig.from_toml_dict(dict(data))
    return MutableConfig.from_defaults().merge_with(layer).freeze()
