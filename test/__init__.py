import io
import logging
import os
import random
import string
import tempfile
import unittest

import b64d

from b64d import Configuration, Reporter, Scanner


__all__ = ['b64d', 'TestBase']


class TestBase(unittest.TestCase):

    def generate_random_buffer(self, size):
        return bytes(random.randrange(0, 0x100) for _ in range(size))

    def generate_random_text(self, size):
        return ''.join(string.printable[
            random.randrange(0, len(string.printable))] for _ in range(size)).encode('UTF8')

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' buffers
        logging.disable(logging.CRITICAL)
        logging.getLogger('b64d').setLevel(logging.NOTSET)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def write_input(self, data: bytes) -> str:
        """
        Write the given data to a temporary file that is removed after the test.
        """
        fd, path = tempfile.mkstemp(prefix='b64d.test-data.', suffix='.txt')
        with os.fdopen(fd, 'wb') as stream:
            stream.write(data)
        self.addCleanup(os.unlink, path)
        return path

    def scan(self, data: bytes, **config) -> bytes:
        """
        Run the scanner over the given input and return everything it printed.
        """
        output = io.BytesIO()
        errors = io.StringIO()
        configuration = Configuration(**config)
        scanner = Scanner(configuration, Reporter(configuration, output, errors))
        scanner.scan(io.BytesIO(data))
        return output.getvalue()
