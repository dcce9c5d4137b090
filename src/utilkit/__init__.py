"""UTILKIT

Everyday helpers for strings, arrays, dates, DOM manipulation and input
validation.

The same functions are reachable three ways:

    import utilkit
    utilkit.array_utils.chunk([1, 2, 3], 2)   # namespaced
    utilkit.chunk([1, 2, 3], 2)               # flat
    utilkit.default["array"].chunk([1, 2, 3], 2)  # aggregate

Validators whose names are ambiguous across kinds (``is_length``,
``in_range``...) are only available through `utilkit.verify`.
"""

# pylint: disable=redefined-builtin

from . import array_utils, date_utils, dom, string_utils, verify
from .array_utils import (
    chunk,
    compact,
    difference,
    find_index,
    flatten,
    get,
    group_by,
    intersection,
    move,
    sample,
    sort_by,
    sum_by,
    unique,
)
from .date_utils import (
    add,
    diff,
    end_of,
    format,
    get_dates_between,
    get_day_of_year,
    get_days_in_month,
    get_days_in_year,
    get_first_day_of_month,
    get_first_day_of_quarter,
    get_last_day_of_month,
    get_last_day_of_quarter,
    get_quarter,
    get_week_of_year,
    is_after,
    is_before,
    is_between,
    is_leap_year,
    is_today,
    is_valid_date,
    is_weekend,
    relative_time,
    start_of,
    subtract,
    to_date,
)
from .dom import anim, attrs, cls, css, el, evt, form_utils
from .results import (
    PasswordDetails,
    PasswordStrengthResult,
    PasswordValidationResult,
    StrengthDetails,
    StrengthLevel,
)
from .string_utils import (
    camel_to_kebab,
    capitalize,
    ends_with,
    escape,
    kebab_to_camel,
    pad,
    repeat,
    reverse,
    starts_with,
    to_snake_case,
    trim,
    truncate,
    word_count,
)
from .toolkit import Toolkit
from .verify import get_password_strength, is_empty, validate_password
from .verify.strings import (
    is_alpha,
    is_alphanumeric,
    is_email,
    is_id_card,
    is_phone,
    is_string,
    is_url,
    is_zip_code,
)

__version__ = "0.1.0"

default = Toolkit(
    string=string_utils,
    array=array_utils,
    date=date_utils,
    dom=dom,
    verify=verify,
)

__all__ = [
    "__version__",
    "default",
    "Toolkit",
    # groups
    "string_utils",
    "array_utils",
    "date_utils",
    "dom",
    "verify",
    # results
    "PasswordDetails",
    "PasswordValidationResult",
    "StrengthDetails",
    "StrengthLevel",
    "PasswordStrengthResult",
    # string
    "capitalize",
    "camel_to_kebab",
    "kebab_to_camel",
    "to_snake_case",
    "truncate",
    "trim",
    "repeat",
    "escape",
    "reverse",
    "pad",
    "starts_with",
    "ends_with",
    "word_count",
    # array
    "get",
    "unique",
    "chunk",
    "flatten",
    "intersection",
    "difference",
    "compact",
    "sort_by",
    "find_index",
    "group_by",
    "sample",
    "move",
    "sum_by",
    # date
    "to_date",
    "is_valid_date",
    "format",
    "relative_time",
    "start_of",
    "end_of",
    "add",
    "subtract",
    "diff",
    "get_day_of_year",
    "get_week_of_year",
    "is_leap_year",
    "get_days_in_month",
    "get_days_in_year",
    "is_weekend",
    "is_today",
    "is_after",
    "is_before",
    "is_between",
    "get_dates_between",
    "get_first_day_of_month",
    "get_last_day_of_month",
    "get_first_day_of_quarter",
    "get_last_day_of_quarter",
    "get_quarter",
    # dom
    "cls",
    "css",
    "attrs",
    "evt",
    "el",
    "form_utils",
    "anim",
    # verify
    "is_empty",
    "validate_password",
    "get_password_strength",
    "is_string",
    "is_email",
    "is_phone",
    "is_url",
    "is_id_card",
    "is_zip_code",
    "is_alpha",
    "is_alphanumeric",
]
