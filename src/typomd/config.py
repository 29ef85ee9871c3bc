"""Configuration loader for typomd.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .errors import ConfigError

OUTPUT_FORMATS = ("html", "text", "json", "yaml")


@dataclass
class NormalizeConfig:
    """Character normalization settings."""
    smart_quotes: bool = True


@dataclass
class RenderConfig:
    """Output settings shared by the CLI and the API."""
    format: str = "html"
    strip_heading_emphasis: bool = True


@dataclass
class ServerConfig:
    """Local HTTP API settings."""
    host: str = "127.0.0.1"
    port: int = 8765
    cors: bool = False


@dataclass
class TypomdConfig:
    """Complete typomd configuration."""
    normalize: NormalizeConfig = field(default_factory=NormalizeConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    source: Path | None = None


def _bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def load_config(config_path: Path | None = None) -> TypomdConfig:
    """
    Load configuration from typomd.toml.

    Search order:
    1. config_path (if provided; must exist)
    2. cwd/typomd.toml

    Missing file means defaults. Bad values raise ConfigError.
    """
    toml_data: dict[str, Any] = {}
    source = None

    if config_path is not None and not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    search_paths = [config_path] if config_path else []
    search_paths.append(Path.cwd() / "typomd.toml")

    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{path}: {e}") from e
            source = path
            break

    norm_data = toml_data.get("normalize", {})
    normalize = NormalizeConfig(
        smart_quotes=_bool(norm_data, "smart_quotes", True),
    )

    render_data = toml_data.get("render", {})
    fmt = render_data.get("format", "html")
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(f"render.format must be one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}")
    render = RenderConfig(
        format=fmt,
        strip_heading_emphasis=_bool(render_data, "strip_heading_emphasis", True),
    )

    server_data = toml_data.get("server", {})
    port = server_data.get("port", 8765)
    if not isinstance(port, int) or isinstance(port, bool) or not 0 < port < 65536:
        raise ConfigError(f"server.port must be an integer in 1..65535, got {port!r}")
    server = ServerConfig(
        host=str(server_data.get("host", "127.0.0.1")),
        port=port,
        cors=_bool(server_data, "cors", False),
    )

    return TypomdConfig(normalize=normalize, render=render, server=server, source=source)
