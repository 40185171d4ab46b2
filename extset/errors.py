class InvalidArgument(ValueError):
    def __init__(self, message):
        super(InvalidArgument, self).__init__(message)


def absent_argument_error(name):
    return InvalidArgument('%s must not be None' % name)


def absent_element_error(name):
    return InvalidArgument('%s must not contain None' % name)


def not_an_extended_set_error(name, value):
    return InvalidArgument(
        '%s must be an ExtendedSet, got %s' % (name, type(value).__name__))
