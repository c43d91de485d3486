"""npm package name validation used to vet new project names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

__all__ = ["ValidationResult", "validate_package_name", "MAX_NAME_LENGTH"]


MAX_NAME_LENGTH = 214

_BLACKLIST = frozenset({"node_modules", "favicon.ico"})

# Core modules shipped with Node.js; npm refuses them for new packages.
_NODE_BUILTINS = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

_SCOPED_PACKAGE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")


def _is_url_friendly(value: str) -> bool:
    # Mirrors encodeURIComponent: these punctuation marks pass through unescaped.
    return quote(value, safe="!*'()") == value


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :func:`validate_package_name`.

    Attributes
    ----------
    errors:
        Every rule the name violates, in the order the rules are checked. This
        includes the rules npm only enforces for new packages, since a
        freshly scaffolded project is always a new package.
    warnings:
        The subset of :attr:`errors` that npm still tolerates for packages
        that were published before the rule existed.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def acceptable(self) -> bool:
        return not self.errors


def validate_package_name(name: str) -> ValidationResult:
    """Check ``name`` against the npm rules for new package names."""

    if not isinstance(name, str):
        raise TypeError(f"package name must be a string, not {type(name).__name__}")

    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        errors.append("name length must be greater than zero")

    if name.startswith("."):
        errors.append("name cannot start with a period")

    if name.startswith("_"):
        errors.append("name cannot start with an underscore")

    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    if name.lower() in _BLACKLIST:
        errors.append(f"{name} is a blacklisted name")

    if name.lower() in _NODE_BUILTINS:
        warnings.append(f"{name} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")

    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")

    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not _is_url_friendly(name):
        match = _SCOPED_PACKAGE.match(name)
        scoped_ok = (
            match is not None
            and match.group(1) is not None
            and _is_url_friendly(match.group(1))
            and _is_url_friendly(match.group(2))
        )
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return ValidationResult(errors=tuple(errors + warnings), warnings=tuple(warnings))
