"""Setting values declared in the [settings] table."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any


class JavaVersion(Enum):
    """Java language level targeted by the build."""

    VERSION_1_8 = "1.8"
    VERSION_11 = "11"
    VERSION_17 = "17"
    VERSION_21 = "21"
    VERSION_25 = "25"

    @classmethod
    def parse(cls, raw: object) -> "JavaVersion":
        """Parse "17", 17, "1.8", "8" or "VERSION_17" into a JavaVersion.

        Raises:
            ValueError: If the value names no known language level
        """
        text = str(raw).strip()
        if text.startswith("VERSION_"):
            text = text.removeprefix("VERSION_").replace("_", ".")
        if text == "8":
            text = "1.8"
        for member in cls:
            if member.value == text:
                return member
        known = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown Java version '{raw}' (expected one of: {known})")

    def __str__(self) -> str:
        return self.value


SettingValue = str | int | bool | JavaVersion

MIN_SDK = "minSdk"
COMPILE_SDK = "compileSdk"
VERSION_NAME = "versionName"
LANGUAGE_VERSION = "languageVersion"
TOOLCHAIN_VERSION = "toolchainVersion"

_VERSION_NAME_RE = re.compile(r"^\d+\.\d+(\.\d+)?(-[0-9A-Za-z.\-]+)?$")


@dataclass(frozen=True)
class Setting:
    """A named configuration value consumed by the build."""

    name: str
    value: SettingValue


def _require_int(name: str, raw: Any) -> int:
    # bool is an int subclass; "true" is never a valid SDK level
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"Setting '{name}' must be an integer, got {raw!r}")
    if raw <= 0:
        raise ValueError(f"Setting '{name}' must be positive, got {raw}")
    return raw


def _require_str(name: str, raw: Any) -> str:
    if not isinstance(raw, str) or not raw:
        raise ValueError(f"Setting '{name}' must be a non-empty string, got {raw!r}")
    return raw


def coerce_setting(name: str, raw: Any) -> Setting:
    """Convert a raw TOML value into a typed Setting.

    Known keys are checked against their declared types. Other keys keep
    str/int/bool values as-is.

    Raises:
        ValueError: If the value has the wrong type for a known key, or a
            type no setting can hold (tables, arrays, dates)
    """
    if name in (MIN_SDK, COMPILE_SDK):
        return Setting(name, _require_int(name, raw))
    if name == VERSION_NAME:
        value = _require_str(name, raw)
        if _VERSION_NAME_RE.match(value) is None:
            raise ValueError(f"Setting '{name}' is not a valid version name: {value!r}")
        return Setting(name, value)
    if name == LANGUAGE_VERSION:
        return Setting(name, JavaVersion.parse(raw))
    if name == TOOLCHAIN_VERSION:
        return Setting(name, _require_str(name, raw))
    if isinstance(raw, (str, int, bool)):
        return Setting(name, raw)
    raise ValueError(f"Setting '{name}' has unsupported type {type(raw).__name__}")


def validate_settings(settings: dict[str, SettingValue]) -> None:
    """Check cross-setting constraints.

    Raises:
        ValueError: If minSdk is greater than compileSdk
    """
    min_sdk = settings.get(MIN_SDK)
    compile_sdk = settings.get(COMPILE_SDK)
    if isinstance(min_sdk, int) and isinstance(compile_sdk, int) and min_sdk > compile_sdk:
        raise ValueError(f"minSdk ({min_sdk}) must not exceed compileSdk ({compile_sdk})")


def to_toml_value(value: SettingValue) -> str | int | bool:
    """Plain value for writing back to TOML."""
    if isinstance(value, JavaVersion):
        return value.value
    return value


DEFAULT_SETTINGS: tuple[Setting, ...] = (
    Setting(MIN_SDK, 21),
    Setting(COMPILE_SDK, 36),
    Setting(VERSION_NAME, "3.2.14"),
    Setting(LANGUAGE_VERSION, JavaVersion.VERSION_17),
    Setting(TOOLCHAIN_VERSION, "2.0.21"),
)
