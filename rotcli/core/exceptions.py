class RotException(Exception):
    pass


class UnknownEncoding(RotException):
    pass


class InputFileException(RotException):
    pass


class InputFileNotFound(InputFileException):
    pass


class InputFileUnreadable(InputFileException):
    pass


class MalformedEncoding(InputFileException):
    pass


class OutputFileUnwritable(RotException):
    pass
