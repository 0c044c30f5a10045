import io
import struct
import tarfile
import zipfile

import pytest


MODEL_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<model name="acme:contentModel" xmlns="http://www.alfresco.org/model/dictionary/1.0">
    <description>ACME content model</description>
    <version>1.0</version>
</model>
"""

UNRELATED_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<beans xmlns="http://www.springframework.org/schema/beans">
    <bean id="acme.webscript" class="org.acme.WebScript"/>
</beans>
"""


def write_zip(path, members):
    """Write `members` ({name: bytes}) to a zip at `path`, in dict order."""
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, content in members.items():
            zf.writestr(name, content)
    return path


def write_tar(path, members):
    with tarfile.open(path, "w:gz") as tf:
        for name, content in members.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            tf.addfile(info, io.BytesIO(content))
    return path


@pytest.fixture
def make_zip(tmp_path):
    def _make(name, members):
        return write_zip(tmp_path / name, members)
    return _make


def patch_central_header(path, member, flag_bits=None, method=None):
    """
    Rewrite the central-directory record of `member` in the zip at `path`.

    Used to mark a member encrypted (flag bit 0x1) or give it a compression
    method zipfile cannot decode, without needing a tool that writes either.
    """
    data = bytearray(open(path, "rb").read())
    target = member.encode("utf-8")
    offset = data.find(b"PK\x01\x02")
    while offset != -1:
        (name_len,) = struct.unpack_from("<H", data, offset + 28)
        if bytes(data[offset + 46:offset + 46 + name_len]) == target:
            if flag_bits is not None:
                (flags,) = struct.unpack_from("<H", data, offset + 8)
                struct.pack_into("<H", data, offset + 8, flags | flag_bits)
            if method is not None:
                struct.pack_into("<H", data, offset + 10, method)
            with open(path, "wb") as f:
                f.write(data)
            return path
        offset = data.find(b"PK\x01\x02", offset + 4)
    raise KeyError(member)
