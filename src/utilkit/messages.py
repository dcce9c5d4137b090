"""Localized user-facing strings.

Catalogs are keyed by locale and then by message id. Lookups go through
`catalog()`, which resolves the locale with `utilkit.config.get_locale`.
"""

from types import MappingProxyType
from typing import Mapping

from utilkit.config import get_locale

_ZH_CN: dict[str, str] = {
    "weekday.0": "日",
    "weekday.1": "一",
    "weekday.2": "二",
    "weekday.3": "三",
    "weekday.4": "四",
    "weekday.5": "五",
    "weekday.6": "六",
    "meridiem.am": "上午",
    "meridiem.pm": "下午",
    "relative.just_now": "刚刚",
    "relative.minutes": "{n}分钟{suffix}",
    "relative.hours": "{n}小时{suffix}",
    "relative.days": "{n}天{suffix}",
    "relative.weeks": "{n}周{suffix}",
    "relative.months": "{n}个月{suffix}",
    "relative.years": "{n}年{suffix}",
    "relative.past": "前",
    "relative.future": "后",
    "password.not_string": "密码必须是字符串",
    "password.min_length": "密码长度至少为 {min_length} 个字符",
    "password.require_number": "必须包含数字",
    "password.require_letter": "必须包含字母",
    "password.require_lower_case": "必须包含小写字母",
    "password.require_upper_case": "必须包含大写字母",
    "password.require_special_char": "必须包含特殊字符",
    "password.valid": "密码符合要求",
    "password.invalid": "密码不符合以下要求：{requirements}",
    "password.separator": "、",
    "strength.invalid": "无效的密码",
    "strength.weak": "弱密码",
    "strength.medium": "中等强度",
    "strength.strong": "强密码",
    "strength.very-strong": "非常强的密码",
}

_EN_US: dict[str, str] = {
    "weekday.0": "Sun",
    "weekday.1": "Mon",
    "weekday.2": "Tue",
    "weekday.3": "Wed",
    "weekday.4": "Thu",
    "weekday.5": "Fri",
    "weekday.6": "Sat",
    "meridiem.am": "AM",
    "meridiem.pm": "PM",
    "relative.just_now": "just now",
    "relative.minutes": "{n} minutes {suffix}",
    "relative.hours": "{n} hours {suffix}",
    "relative.days": "{n} days {suffix}",
    "relative.weeks": "{n} weeks {suffix}",
    "relative.months": "{n} months {suffix}",
    "relative.years": "{n} years {suffix}",
    "relative.past": "ago",
    "relative.future": "from now",
    "password.not_string": "Password must be a string",
    "password.min_length": "Password must be at least {min_length} characters long",
    "password.require_number": "Must contain a number",
    "password.require_letter": "Must contain a letter",
    "password.require_lower_case": "Must contain a lowercase letter",
    "password.require_upper_case": "Must contain an uppercase letter",
    "password.require_special_char": "Must contain a special character",
    "password.valid": "Password meets all requirements",
    "password.invalid": "Password does not meet the following requirements: {requirements}",
    "password.separator": ", ",
    "strength.invalid": "Invalid password",
    "strength.weak": "Weak password",
    "strength.medium": "Medium strength",
    "strength.strong": "Strong password",
    "strength.very-strong": "Very strong password",
}

CATALOGS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "zh-CN": MappingProxyType(_ZH_CN),
        "en-US": MappingProxyType(_EN_US),
    }
)


def catalog(locale: str | None = None) -> Mapping[str, str]:
    """Return the read-only message catalog for ``locale``.

    Args:
        locale: Requested locale; None uses the configured default.

    Returns:
        Mapping of message id to template string.
    """
    return CATALOGS[get_locale(locale)]


def message(key: str, locale: str | None = None, **params: object) -> str:
    """Look up ``key`` in the resolved catalog and format it with ``params``."""
    template = catalog(locale)[key]
    return template.format(**params) if params else template
