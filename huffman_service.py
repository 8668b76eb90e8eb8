# filename: huffman_service.py

import logging
import struct
from collections import namedtuple

import huffman_bits
import huffman_tree_codec
from huffman_core import HuffmanLogic
from huffman_errors import InputFileError, MalformedContainerError, OutputFileError

logger = logging.getLogger(__name__)

# Padding count: 4-byte little-endian signed int, as the original tool writes it on x86/ARM.
HEADER = struct.Struct("<i")

CompressionStats = namedtuple("CompressionStats", ["original_size", "compressed_size", "ratio"])


def read_bytes(path):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise InputFileError(f"cannot read input file {path!r}: {exc.strerror or exc}") from exc


def write_bytes(path, data):
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise OutputFileError(f"cannot write output file {path!r}: {exc.strerror or exc}") from exc


def _stats(original_size, compressed_size):
    ratio = compressed_size / original_size if original_size else 0.0
    return CompressionStats(original_size, compressed_size, ratio)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def compress(self, data):
        data = bytes(data)
        freqs = self.logic.count_frequencies(data)
        if not freqs:
            logger.debug("empty input, writing header only")
            return HEADER.pack(0)

        tree = self.logic.build_tree(freqs)
        codes = self.logic.generate_codes(tree)

        encoded_str = "".join([codes[byte] for byte in data])
        packed, padding = huffman_bits.encode(encoded_str)
        serialized_tree = huffman_tree_codec.serialize(tree)

        logger.debug(
            "compressed %d bytes: %d symbols, %d tree bytes, %d packed bytes, %d padding bits",
            len(data), len(freqs), len(serialized_tree), len(packed), padding,
        )
        return HEADER.pack(padding) + serialized_tree + packed

    def decompress(self, container):
        container = bytes(container)
        if len(container) < HEADER.size:
            raise MalformedContainerError(
                f"container is {len(container)} bytes, shorter than its {HEADER.size}-byte header"
            )
        (padding,) = HEADER.unpack_from(container)
        if not 0 <= padding <= 7:
            raise MalformedContainerError(f"padding count {padding} is outside 0..7")
        if len(container) == HEADER.size:
            if padding:
                raise MalformedContainerError("padding declared for an empty container")
            return b""

        root, offset = huffman_tree_codec.deserialize(container, HEADER.size)
        packed = container[offset:]
        if not packed:
            raise MalformedContainerError("container holds a tree but no packed bitstream")

        try:
            bits = huffman_bits.decode(packed, padding)
        except ValueError as exc:
            raise MalformedContainerError(str(exc)) from exc

        decoded = self._walk(root, bits)
        logger.debug("decompressed %d container bytes into %d bytes", len(container), len(decoded))
        return decoded

    def _walk(self, root, bits):
        out = bytearray()
        if root.is_leaf:
            # A lone leaf carries the default code "0".
            if "1" in bits:
                raise MalformedContainerError("bitstream descends below a single-leaf tree")
            return bytes([root.byte]) * len(bits)

        current = root
        for bit in bits:
            current = current.left if bit == "0" else current.right
            if current is None:
                raise MalformedContainerError("bitstream descends into a missing child")
            if current.is_leaf:
                out.append(current.byte)
                current = root
        if current is not root:
            raise MalformedContainerError("bitstream ends in the middle of a code")
        return bytes(out)

    def compress_file(self, input_path, output_path):
        data = read_bytes(input_path)
        compressed = self.compress(data)
        write_bytes(output_path, compressed)
        logger.info("compressed %s (%d bytes) to %s (%d bytes)",
                    input_path, len(data), output_path, len(compressed))
        return _stats(len(data), len(compressed))

    def decompress_file(self, input_path, output_path):
        container = read_bytes(input_path)
        data = self.decompress(container)
        write_bytes(output_path, data)
        logger.info("decompressed %s (%d bytes) to %s (%d bytes)",
                    input_path, len(container), output_path, len(data))
        return _stats(len(data), len(container))
