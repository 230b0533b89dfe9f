"""Class-file constant pool reader.

Extracts the class's own name, its superclass and every class it
references through CONSTANT_Class entries. Nothing beyond the header
and constant pool is decoded.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from singleton_detector.domain.exceptions.resource import ClassFileError

CLASS_MAGIC = 0xCAFEBABE

_CONSTANT_UTF8 = 1
_CONSTANT_CLASS = 7

# tag -> payload size in bytes (Utf8 is variable-length)
_PAYLOAD_SIZES = {
    3: 4,  # Integer
    4: 4,  # Float
    5: 8,  # Long
    6: 8,  # Double
    7: 2,  # Class
    8: 2,  # String
    9: 4,  # Fieldref
    10: 4,  # Methodref
    11: 4,  # InterfaceMethodref
    12: 4,  # NameAndType
    15: 3,  # MethodHandle
    16: 2,  # MethodType
    17: 4,  # Dynamic
    18: 4,  # InvokeDynamic
    19: 2,  # Module
    20: 2,  # Package
}

# Long and Double take two constant pool slots
_WIDE_TAGS = frozenset({5, 6})

_HEADER = struct.Struct(">IHHH")
_U2 = struct.Struct(">H")
_CLASS_TAIL = struct.Struct(">HHH")


@dataclass(frozen=True, slots=True)
class ClassFileInfo:
    """Names read from one class file, in dotted form.

    Attributes:
        name: This class
        super_name: Direct superclass, None for java.lang.Object
        referenced: Every other class named in the constant pool
    """

    name: str
    super_name: str | None
    referenced: frozenset[str]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.name in self.referenced:
            raise ValueError(f"referenced must not contain the class itself: {self.name}")


def internal_to_dotted(internal: str) -> str | None:
    """Convert an internal class name or array descriptor to dotted form.

    Returns None for arrays of primitives.

    Example:
        >>> internal_to_dotted("[[Ljava/lang/String;")
        'java.lang.String'
    """
    name = internal.lstrip("[")
    if name != internal:
        if not (name.startswith("L") and name.endswith(";")):
            return None
        name = name[1:-1]
    return name.replace("/", ".")


def read_class_file(data: bytes, resource: str = "<class>") -> ClassFileInfo:
    """Parse header and constant pool of a class file.

    Args:
        data: Raw class file bytes
        resource: Resource name used in error messages

    Returns:
        ClassFileInfo for the class

    Raises:
        ClassFileError: Bad magic, truncated data or unknown constant tag
    """
    try:
        magic, _minor, _major, pool_count = _HEADER.unpack_from(data, 0)
    except struct.error as e:
        raise ClassFileError(resource, "truncated header") from e
    if magic != CLASS_MAGIC:
        raise ClassFileError(resource, f"bad magic 0x{magic:08X}")

    utf8: dict[int, str] = {}
    class_refs: dict[int, int] = {}
    offset = _HEADER.size
    index = 1
    try:
        while index < pool_count:
            tag = data[offset]
            offset += 1
            if tag == _CONSTANT_UTF8:
                (length,) = _U2.unpack_from(data, offset)
                offset += _U2.size
                raw = data[offset : offset + length]
                if len(raw) != length:
                    raise ClassFileError(resource, f"truncated Utf8 constant #{index}")
                # modified UTF-8; class names never need the exotic encodings
                utf8[index] = raw.decode("utf-8", errors="replace")
                offset += length
            elif tag in _PAYLOAD_SIZES:
                if tag == _CONSTANT_CLASS:
                    (class_refs[index],) = _U2.unpack_from(data, offset)
                offset += _PAYLOAD_SIZES[tag]
            else:
                raise ClassFileError(resource, f"unknown constant tag {tag} at #{index}")
            index += 2 if tag in _WIDE_TAGS else 1

        _access, this_index, super_index = _CLASS_TAIL.unpack_from(data, offset)
    except (IndexError, struct.error) as e:
        raise ClassFileError(resource, "truncated constant pool") from e

    def class_name(pool_index: int) -> str | None:
        name_index = class_refs.get(pool_index)
        if name_index is None or name_index not in utf8:
            raise ClassFileError(resource, f"constant #{pool_index} is not a class")
        return internal_to_dotted(utf8[name_index])

    name = class_name(this_index)
    if not name:
        raise ClassFileError(resource, "this_class is not a class name")
    super_name = class_name(super_index) if super_index else None

    referenced: set[str] = set()
    for pool_index in class_refs:
        ref = class_name(pool_index)
        if ref and ref != name:
            referenced.add(ref)

    return ClassFileInfo(name=name, super_name=super_name, referenced=frozenset(referenced))
