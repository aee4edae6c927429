import os
from typing import BinaryIO, Union

import attr

__all__ = ("File",)


@attr.define
class File:
    """A file to upload with a message"""

    name: str = attr.field()
    """ The file name discord shows """

    content: Union[bytes, BinaryIO] = attr.field(repr=False)
    """ Raw bytes or a binary stream positioned at the start of the data """

    @classmethod
    def from_path(cls, path: str) -> "File":
        with open(path, "rb") as fp:
            data = fp.read()
        return cls(os.path.basename(path), data)

    def read(self) -> bytes:
        """The whole content, streams are read to the end"""

        if isinstance(self.content, (bytes, bytearray)):
            return bytes(self.content)
        return self.content.read()
