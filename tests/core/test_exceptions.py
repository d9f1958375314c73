import unittest

from rotcli.core.exceptions import (
    InputFileException,
    InputFileNotFound,
    InputFileUnreadable,
    MalformedEncoding,
    OutputFileUnwritable,
    RotException,
    UnknownEncoding,
)


class TestExceptionHierarchy(unittest.TestCase):
    def test_input_failures_are_input_file_exceptions(self):
        for exception in [InputFileNotFound, InputFileUnreadable, MalformedEncoding]:
            self.assertTrue(issubclass(exception, InputFileException))

    def test_all_failures_are_rot_exceptions(self):
        for exception in [InputFileException, UnknownEncoding, OutputFileUnwritable]:
            self.assertTrue(issubclass(exception, RotException))

    def test_output_failures_are_not_input_failures(self):
        self.assertFalse(issubclass(OutputFileUnwritable, InputFileException))
