"""
Static message templates and operator vocabulary.

Templates contain the ``:attribute`` placeholder, substituted with the field
name when a failure is reported, and ``str.format`` fields for rule parameters.
"""

ATTRIBUTE_PLACEHOLDER = ":attribute"

UNEXPECTED_ERROR = "Unexpected error occurred."

# Comparator tokens -> phrases used in conditional failure messages
OPERATORS: dict[str, str] = {
    "==": "equal to",
    "!=": "not equal to",
    "<": "less than",
    ">": "greater than",
    "<=": "less than or equal to",
    ">=": "greater than or equal to",
}

INVALID_OPERATOR = "The operation must be one of the following: " + ", ".join(OPERATORS)

MESSAGES: dict[str, str] = {
    # presence
    "required": "The :attribute is required",
    "required_if_present": "The :attribute is required if the {other} is present",
    "required_if": "The :attribute is required if the {other} is {operator} {expected}",
    "accepted": "The :attribute must be accepted",
    "accepted_if_present": "The :attribute must be accepted if the {other} is present",
    "accepted_if": "The :attribute must be accepted if the {other} is {operator} {expected}",
    "declined": "The :attribute must be declined",
    "declined_if_present": "The :attribute must be declined if the {other} is present",
    "declined_if": "The :attribute must be declined if the {other} is {operator} {expected}",
    "boolean": "The :attribute must be a boolean",
    # types
    "array": "The :attribute must be an array",
    "distinct": "The :attribute must be distinct",
    "numeric": "The :attribute must be numeric",
    "integer": "The :attribute must be an integer",
    "decimal": "The :attribute must be a decimal",
    "decimal_max": "The :attribute must be a decimal with {max} digits after the decimal point",
    "decimal_range": "The :attribute must be a decimal with {min} to {max} digits after the decimal point",
    # formats
    "alpha": "The :attribute must contain only alphabets",
    "alpha_dash": "The :attribute must contain only alphabets, dashes and underscores",
    "alpha_num": "The :attribute must contain only alphabets and numbers",
    "alpha_num_dash": "The :attribute must contain only alphabets, numbers, dashes and underscores",
    "email": "The :attribute must be an email",
    "url": "The :attribute must be a URL",
    "ip": "The :attribute must be an IP address",
    "ip_version": "The :attribute must be an IP address of version {version}",
    "mac_address": "The :attribute must be a MAC address",
    "regex": "The :attribute must match the regex pattern",
    "not_regex": "The :attribute must not match the regex pattern",
    "timezone": "The :attribute must be a timezone",
    # dates
    "date": "The :attribute must be a date",
    "after": "The :attribute must be after {date}",
    "after_or_equal": "The :attribute must be after or equal to {date}",
    "before": "The :attribute must be before {date}",
    "before_or_equal": "The :attribute must be before or equal to {date}",
    "date_equals": "The :attribute must be equal to {date}",
    "between_date": "The :attribute must be between {min} and {max}",
    "between_date_exclusive": "The :attribute must be between {min} and {max} (exclusive)",
    # ranges and literals
    "between": "The :attribute must be between {min} and {max}",
    "between_number": "The :attribute must be a number",
    "between_exclusive": "The :attribute must be between {min} and {max} (exclusive)",
    "max": "The :attribute must be less than or equal to {value}",
    "min": "The :attribute must be greater than or equal to {value}",
    "equal": "The :attribute must be equal to {value}",
    "not_equal": "The :attribute must not be equal to {value}",
    # cross-field
    "greater_than": "The :attribute must be greater than {other}",
    "greater_than_or_equal": "The :attribute must be greater than or equal to {other}",
    "less_than": "The :attribute must be less than {other}",
    "less_than_or_equal": "The :attribute must be less than or equal to {other}",
    "different": "The :attribute must be different from {other}",
    "confirmed": "The :attribute must be confirmed",
    "in_array": "The :attribute must be in the {other}",
    "not_in_array": "The :attribute must not be in the {other}",
}

# Configuration problems reported as ordinary failures
CONFIG_MESSAGES: dict[str, str] = {
    "other_field_missing": "The other field is not provided",
    "other_field_absent": "{other} is not present in the request",
    "other_field_absent_named": "The other field ({other}) is not present in the request",
    "confirmation_absent": "The {other} is not present in the request",
    "target_field_missing": "Target field is not provided",
    "target_field_absent": "The target field ({other}) is not present in the request",
    "target_field_not_array": "The target field ({other}) must be an array",
    "expected_date_missing": "The expected date is not provided",
    "expected_date_invalid": "The expected date ({date}) is not a valid date",
    "date_range_missing": "The minimum and maximum date are not provided",
    "value_range_missing": "The minimum and maximum value are not provided",
    "value_range_invalid": "The minimum and maximum value must be numeric",
    "expected_value_missing": "The expected value is not provided",
    "decimal_digits_missing": "The number of digits after the decimal point is not provided",
    "decimal_digits_invalid": "The number of digits after the decimal point must be an integer",
    "ip_version_invalid": "The IP version must be v4 or v6",
    "pattern_missing": "The regex pattern is not provided",
    "pattern_invalid": "The regex pattern is invalid",
    "rule_not_found": "{name} Rule not found",
}


def format_message(template: str, field: str) -> str:
    """Substitute the field name for the ``:attribute`` placeholder."""
    return template.replace(ATTRIBUTE_PLACEHOLDER, field)
