from monkey.objects import NULL, Array, Builtin, Error, Integer, String


def _check_arity(args, expected):
    if len(args) != expected:
        return Error.argument_wrong_number(expected, len(args))
    return None


def _len(args):
    if error := _check_arity(args, 1):
        return error
    match args[0]:
        case String(value):
            return Integer(len(value))
        case Array(elements):
            return Integer(len(elements))
        case arg:
            return Error.argument_not_supported("len", arg)


def _first(args):
    if error := _check_arity(args, 1):
        return error
    match args[0]:
        case Array(elements):
            return elements[0] if elements else NULL
        case arg:
            return Error.argument_not_supported("first", arg)


def _last(args):
    if error := _check_arity(args, 1):
        return error
    match args[0]:
        case Array(elements):
            return elements[-1] if elements else NULL
        case arg:
            return Error.argument_not_supported("last", arg)


def _rest(args):
    if error := _check_arity(args, 1):
        return error
    match args[0]:
        case Array(elements):
            return Array(elements[1:]) if elements else NULL
        case arg:
            return Error.argument_not_supported("rest", arg)


def _push(args):
    if error := _check_arity(args, 2):
        return error
    match args[0]:
        case Array(elements):
            return Array(elements + (args[1],))
        case arg:
            return Error.argument_not_supported("push", arg)


BUILTINS = {
    "len": Builtin("len", _len),
    "first": Builtin("first", _first),
    "last": Builtin("last", _last),
    "rest": Builtin("rest", _rest),
    "push": Builtin("push", _push),
}
