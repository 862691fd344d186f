import re


_word_boundary = re.compile(r"_+([a-zA-Z0-9])")


def snake_case_to_camel_case(value):
    value = value.rstrip("_")
    return value[:1].lower() + _word_boundary.sub(lambda match: match.group(1).upper(), value[1:])
