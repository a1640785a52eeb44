import tempfile
import tomllib
from dataclasses import dataclass
from pathlib import Path

from semtag.errors import ConfigurationError

DEFAULT_PREFIX = "v"

_KNOWN_KEYS = frozenset({"uri", "repository", "branch", "prefix", "work_dir"})


def default_work_dir() -> Path:
    """Scratch location for the working copy when driving a remote URI."""
    return Path(tempfile.gettempdir()) / "semtag" / "repo"


@dataclass(frozen=True)
class DriverConfig:
    """In-memory representation of the driver configuration.

    Exactly one of ``uri`` and ``repository`` is set. ``work_dir`` is only used
    together with ``uri``: it is where the local working copy is initialized.

    Example semtag.toml:
      uri = "git@example.com:org/repo.git"
      # or: repository = "/path/to/checkout"
      branch = "main"
      prefix = "v"
    """

    prefix: str
    uri: str | None
    repository: Path | None
    branch: str | None
    work_dir: Path

    @staticmethod
    def create(
        *,
        prefix: str | None = None,
        uri: str | None = None,
        repository: Path | None = None,
        branch: str | None = None,
        work_dir: Path | None = None,
    ) -> "DriverConfig":
        """Build a validated config, filling in the default prefix.

        Raises:
            ConfigurationError: If neither or both of uri/repository are given
        """
        uri = uri or None
        branch = branch or None
        if uri is None and repository is None:
            raise ConfigurationError(
                "Expected either repository (path) or URI to be configured."
            )
        if uri is not None and repository is not None:
            raise ConfigurationError(
                "Expected only one of repository (path) or URI to be configured, got both."
            )
        return DriverConfig(
            prefix=prefix or DEFAULT_PREFIX,
            uri=uri,
            repository=repository,
            branch=branch,
            work_dir=work_dir if work_dir is not None else default_work_dir(),
        )


def read_config_file(path: Path) -> dict[str, str]:
    """Read raw config values from a TOML file.

    Unknown keys are rejected so that typos do not silently fall back to
    defaults.

    Raises:
        ConfigurationError: If the file is missing, unparsable, or has bad keys
    """
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    values: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigurationError(f"Config key '{key}' in {path} must be a string")
        values[key] = value
    return values


def load_config(
    path: Path | None,
    *,
    overrides: dict[str, str | None] | None = None,
) -> DriverConfig:
    """Load config from an optional TOML file, applying non-empty overrides.

    Args:
        path: TOML file to read, or None to use overrides only
        overrides: Values (typically from CLI options) that win over the file

    Returns:
        A validated DriverConfig
    """
    values: dict[str, str] = read_config_file(path) if path is not None else {}
    for key, value in (overrides or {}).items():
        if value:
            values[key] = value

    repository = values.get("repository")
    work_dir = values.get("work_dir")
    return DriverConfig.create(
        prefix=values.get("prefix"),
        uri=values.get("uri"),
        repository=Path(repository) if repository else None,
        branch=values.get("branch"),
        work_dir=Path(work_dir) if work_dir else None,
    )
