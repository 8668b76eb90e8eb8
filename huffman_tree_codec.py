# filename: huffman_tree_codec.py

from huffman_core import HuffmanNode
from huffman_errors import MalformedContainerError

LEAF_FLAG = ord("1")
INTERNAL_FLAG = ord("0")

# A tree over at most 256 distinct leaves is never deeper than 255.
MAX_DEPTH = 256


def serialize(root):
    """Pre-order dump: b"1" + byte for a leaf, b"0" then left and right for an internal node."""
    out = bytearray()

    def walk(node):
        if node.is_leaf:
            out.append(LEAF_FLAG)
            out.append(node.byte)
        else:
            out.append(INTERNAL_FLAG)
            walk(node.left)
            walk(node.right)

    walk(root)
    return bytes(out)


def deserialize(data, offset=0):
    """
    Rebuild a tree from `data` starting at `offset`.

    Returns:
        Tuple[HuffmanNode, int]: The root and the offset of the first byte after the tree.
    """
    end = len(data)

    def read(pos, depth):
        if depth > MAX_DEPTH:
            raise MalformedContainerError("tree is nested deeper than any valid Huffman tree")
        if pos >= end:
            raise MalformedContainerError(f"tree ends unexpectedly at offset {pos}")
        flag = data[pos]
        if flag == LEAF_FLAG:
            if pos + 1 >= end:
                raise MalformedContainerError(f"leaf at offset {pos} is missing its byte")
            return HuffmanNode(data[pos + 1]), pos + 2
        if flag != INTERNAL_FLAG:
            raise MalformedContainerError(f"unknown node flag 0x{flag:02x} at offset {pos}")
        left, pos = read(pos + 1, depth + 1)
        right, pos = read(pos, depth + 1)
        return HuffmanNode(None, 0, left, right), pos

    return read(offset, 0)
