"""
Format rules matched with regular expressions: character classes, email,
URL, IP and MAC addresses, user-supplied patterns and timezone names.
"""

import re
from collections.abc import Sequence
from typing import Any

import pytz

from fieldrules.core.messages import CONFIG_MESSAGES, MESSAGES
from fieldrules.core.models import Verdict

from .base_validator import RuleConfigurationError, require_params, rule
from .coercion import as_text

ALPHA = re.compile(r"[a-zA-Z]+")
ALPHA_DASH = re.compile(r"[a-zA-Z_-]+")
ALPHA_NUM = re.compile(r"[a-zA-Z0-9]+")
ALPHA_NUM_DASH = re.compile(r"[a-zA-Z0-9_-]+")
EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
URL = re.compile(r"https?://\S+")
IPV4 = re.compile(r"(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})")
IPV6 = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")
MAC_ADDRESS = re.compile(r"([0-9a-fA-F]{2}[:-]){5}[0-9a-fA-F]{2}")


def _full_match(pattern: re.Pattern, value: Any) -> bool:
    text = as_text(value)
    return text is not None and pattern.fullmatch(text) is not None


def _pattern_rule(name: str, pattern: re.Pattern):
    """Register a rule that passes when the whole value matches ``pattern``."""

    def check(value: Any, *_: Any) -> Verdict:
        if _full_match(pattern, value):
            return Verdict.passed()
        return Verdict.fail(MESSAGES[name])

    check.__name__ = name
    check.__doc__ = f"Whole-value match against {pattern.pattern!r}."
    return rule(name)(check)


alpha = _pattern_rule("alpha", ALPHA)
alpha_dash = _pattern_rule("alpha_dash", ALPHA_DASH)
alpha_num = _pattern_rule("alpha_num", ALPHA_NUM)
alpha_num_dash = _pattern_rule("alpha_num_dash", ALPHA_NUM_DASH)
email = _pattern_rule("email", EMAIL)
url = _pattern_rule("url", URL)
mac_address = _pattern_rule("mac_address", MAC_ADDRESS)


def is_ipv4(value: Any) -> bool:
    text = as_text(value)
    match = IPV4.fullmatch(text) if text is not None else None
    return match is not None and all(int(octet) <= 255 for octet in match.groups())


def is_ipv6(value: Any) -> bool:
    return _full_match(IPV6, value)


@rule("ip")
def ip(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    """IPv4 or full eight-group IPv6; ``ip:v4`` / ``ip:v6`` restrict the form."""
    version = params[0].strip() if params else ""

    if not version:
        if is_ipv4(value) or is_ipv6(value):
            return Verdict.passed()
        return Verdict.fail(MESSAGES["ip"])

    checks = {"v4": is_ipv4, "v6": is_ipv6}
    if version not in checks:
        raise RuleConfigurationError(CONFIG_MESSAGES["ip_version_invalid"])
    if checks[version](value):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["ip_version"].format(version=version))


def _compile(params: Sequence[str]) -> re.Pattern:
    require_params(params, 1, CONFIG_MESSAGES["pattern_missing"])
    try:
        return re.compile(params[0])
    except re.error:
        raise RuleConfigurationError(CONFIG_MESSAGES["pattern_invalid"])


@rule("regex")
def regex(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    pattern = _compile(params)
    text = as_text(value)
    if text is not None and pattern.search(text):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["regex"])


@rule("not_regex")
def not_regex(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    pattern = _compile(params)
    text = as_text(value)
    if text is not None and pattern.search(text):
        return Verdict.fail(MESSAGES["not_regex"])
    return Verdict.passed()


@rule("timezone")
def timezone(value: Any, *_: Any) -> Verdict:
    if isinstance(value, str) and value in pytz.all_timezones_set:
        return Verdict.passed()
    return Verdict.fail(MESSAGES["timezone"])
