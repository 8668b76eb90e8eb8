# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure reported by the compressor."""


class InputFileError(HuffmanError):
    pass


class OutputFileError(HuffmanError):
    pass


class MalformedContainerError(HuffmanError):
    """The compressed container is truncated or does not describe a valid stream."""


class InvalidArgumentsError(HuffmanError):
    pass
