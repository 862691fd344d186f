_undefined = object()


def find(predicate, iterable, default=_undefined):
    for element in iterable:
        if predicate(element):
            return element

    if default is _undefined:
        raise ValueError("could not find matching element")
    else:
        return default


def to_dict(iterable):
    result = {}

    for key, value in iterable:
        if key in result:
            raise KeyError("key is already in dict: {!r}".format(key))

        result[key] = value

    return result


def to_multidict(iterable):
    result = {}

    for key, value in iterable:
        result.setdefault(key, []).append(value)

    return result


def unique(iterable):
    seen = set()
    result = []

    for element in iterable:
        if element not in seen:
            seen.add(element)
            result.append(element)

    return result
