def normalize_version(version: str) -> str:
    """Strip surrounding whitespace and one leading "v" or "V" ("v1.2.0" -> "1.2.0")."""
    version = version.strip()
    return version[1:] if version[:1] in ("v", "V") else version


def with_v_prefix(version: str) -> str:
    """Ensure exactly one leading "v" ("1.2.0" -> "v1.2.0")."""
    return f"v{normalize_version(version)}"
