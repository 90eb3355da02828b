import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import make_manifest_error
from .ir import ReferenceMode

MANIFEST_FILE = "tokens.toml"

DEFAULT_SOURCES = ["tokens/**/*.tokens", "tokens/**/*.json"]

HEADER_COMMENT = """/**
 * Do not edit directly, this file was auto-generated.
 */

"""

FORMATS = ("css/variables", "css/variables-combined", "css/variables-dark")


@dataclass
class FilterConfig:
    """Source path filter for an output file.

    A token passes when its source path contains every ``path_contains``
    substring and none of the ``path_excludes`` substrings.
    """

    path_contains: list[str] = field(default_factory=list)
    path_excludes: list[str] = field(default_factory=list)

    def matches(self, source: str) -> bool:
        if any(part not in source for part in self.path_contains):
            return False
        return not any(part in source for part in self.path_excludes)


@dataclass
class FileConfig:
    """One generated stylesheet."""

    destination: str
    format: str = "css/variables"
    filter: FilterConfig = field(default_factory=FilterConfig)
    output_references: bool = False
    reference_mode: ReferenceMode | None = None  # None: the format's default


@dataclass
class PlatformConfig:
    """A group of output files sharing a build path."""

    name: str
    build_path: str = "build/"
    files: list[FileConfig] = field(default_factory=list)


@dataclass
class ProjectManifest:
    """
    Project manifest loaded from tokens.toml.

    Examples in tokens.toml:

        [project]
        name = "brand"
        source = ["tokens/**/*.json"]

        [[platforms]]
        name = "css_base"
        build_path = "build/css/base/"

        [[platforms.files]]
        destination = "colors.css"
        format = "css/variables"
        filter = { path_contains = ["base"] }
    """

    name: str = "unnamed"
    source: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    header: str = HEADER_COMMENT
    platforms: list[PlatformConfig] = field(default_factory=list)


def default_platforms() -> list[PlatformConfig]:
    """Base colors plus combined semantic colors, as shipped by default."""
    return [
        PlatformConfig(
            name="css_base",
            build_path="build/css/base/",
            files=[
                FileConfig(
                    destination="colors.css",
                    format="css/variables",
                    filter=FilterConfig(path_contains=["base"]),
                )
            ],
        ),
        PlatformConfig(
            name="css_semantic",
            build_path="build/css/semantic/",
            files=[
                FileConfig(
                    destination="colors.css",
                    format="css/variables-combined",
                    output_references=True,
                )
            ],
        ),
    ]


def default_manifest() -> ProjectManifest:
    return ProjectManifest(platforms=default_platforms())


def _parse_reference_mode(value: str | None, path: Path | None) -> ReferenceMode | None:
    if value is None:
        return None
    try:
        return ReferenceMode(value)
    except ValueError:
        choices = ", ".join(mode.value for mode in ReferenceMode)
        raise make_manifest_error(
            f"Unknown reference_mode {value!r} (expected one of: {choices})", path
        ) from None


def _table(value: object, what: str, path: Path | None) -> dict:
    if not isinstance(value, dict):
        raise make_manifest_error(f"{what} must be a table, got {type(value).__name__}", path)
    return value


def _table_list(value: object, what: str, path: Path | None) -> list[dict]:
    if not isinstance(value, list):
        raise make_manifest_error(
            f"{what} must be an array of tables, got {type(value).__name__}", path
        )
    return [_table(item, what, path) for item in value]


def _string(value: object, what: str, path: Path | None) -> str:
    if not isinstance(value, str):
        raise make_manifest_error(f"{what} must be a string, got {type(value).__name__}", path)
    return value


def _string_list(value: object, what: str, path: Path | None) -> list[str]:
    """Accept a string or an array of strings."""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise make_manifest_error(f"{what} must be a string or an array of strings", path)
    return list(value)


def _parse_filter(value: object, path: Path | None) -> FilterConfig:
    data = _table(value, "'filter'", path)
    return FilterConfig(
        path_contains=_string_list(data.get("path_contains", []), "'path_contains'", path),
        path_excludes=_string_list(data.get("path_excludes", []), "'path_excludes'", path),
    )


def _parse_file(data: dict, path: Path | None) -> FileConfig:
    if "destination" not in data:
        raise make_manifest_error("Output file is missing 'destination'", path)

    fmt = data.get("format", "css/variables")
    if fmt not in FORMATS:
        raise make_manifest_error(
            f"Unknown format {fmt!r} (expected one of: {', '.join(FORMATS)})", path
        )

    output_references = data.get("output_references", False)
    if not isinstance(output_references, bool):
        raise make_manifest_error("'output_references' must be a boolean", path)

    return FileConfig(
        destination=_string(data["destination"], "'destination'", path),
        format=fmt,
        filter=_parse_filter(data.get("filter", {}), path),
        output_references=output_references,
        reference_mode=_parse_reference_mode(data.get("reference_mode"), path),
    )


def _parse_platform(data: dict, index: int, path: Path | None) -> PlatformConfig:
    return PlatformConfig(
        name=_string(data.get("name", f"platform_{index}"), "Platform 'name'", path),
        build_path=_string(data.get("build_path", "build/"), "'build_path'", path),
        files=[
            _parse_file(file, path)
            for file in _table_list(data.get("files", []), "'platforms.files'", path)
        ],
    )


def parse_manifest(data: dict, path: Path | None = None) -> ProjectManifest:
    project = _table(data.get("project", {}), "[project]", path)
    platforms_data = data.get("platforms")

    if platforms_data is None:
        platforms = default_platforms()
    else:
        platforms = [
            _parse_platform(platform, index, path)
            for index, platform in enumerate(_table_list(platforms_data, "'platforms'", path))
        ]

    return ProjectManifest(
        name=_string(project.get("name", "unnamed"), "Project 'name'", path),
        source=_string_list(project.get("source", DEFAULT_SOURCES), "'source'", path),
        header=_string(project.get("header", HEADER_COMMENT), "'header'", path),
        platforms=platforms,
    )


def load_manifest(path: Path) -> ProjectManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise make_manifest_error(f"Invalid TOML: {e}", path) from e
    return parse_manifest(data, path)


def load_project_manifest(project_root: Path, config: Path | None = None) -> ProjectManifest:
    """Load the project's tokens.toml, or the defaults when there is none."""
    path = config or project_root / MANIFEST_FILE
    if path.exists():
        return load_manifest(path)
    if config is not None:
        raise make_manifest_error("Manifest not found", config)
    return default_manifest()
