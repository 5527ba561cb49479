import zipfile

import pytest

import dex_keep.core.dex_container as dex_container
from dex_keep.config.constants import DEX_HEADER_SIZE
from dex_keep.utils import cli_tools

from dex_builder import buildDex


HEADER = b"dex\n035\x00".ljust(DEX_HEADER_SIZE, b"\x00")


def makeDexBlob(*descriptors):
    """A dex header followed by one class descriptor per line, read by FakeDex."""
    return HEADER + "\n".join(descriptors).encode("utf-8")


class FakeDex:
    """Stands in for androguard's DEX: the class list is the text after the header."""

    def __init__(self, buff):
        body = buff[DEX_HEADER_SIZE:]
        if b"CORRUPT" in body:
            raise ValueError("bad string_ids offset")
        self._names = [n for n in body.decode("utf-8").split("\n") if n]

    def get_classes_names(self):
        return list(self._names)


@pytest.fixture
def fake_dex(monkeypatch):
    monkeypatch.setattr(dex_container, "DEX", FakeDex)
    return FakeDex


@pytest.fixture(autouse=True)
def reset_args():
    yield
    if hasattr(cli_tools.getArgs, "parsed_args"):
        del cli_tools.getArgs.parsed_args


@pytest.fixture
def write_dex(tmp_path, fake_dex):
    def _write(*descriptors, name="classes.dex"):
        path = tmp_path / name
        path.write_bytes(makeDexBlob(*descriptors))
        return str(path)
    return _write


@pytest.fixture
def write_apk(tmp_path, fake_dex):
    def _write(members, name="app.apk"):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for member, data in members.items():
                zf.writestr(member, data)
        return str(path)
    return _write


@pytest.fixture
def write_real_dex(tmp_path):
    def _write(*descriptors, name="classes.dex"):
        path = tmp_path / name
        path.write_bytes(buildDex(*descriptors))
        return str(path)
    return _write
